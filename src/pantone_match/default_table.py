from __future__ import annotations

from .models import PantoneColor

DEFAULT_PANTONE_TABLE: tuple[PantoneColor, ...] = (
    PantoneColor(code="100 C", hex="#F6EB61", name="Yellow"),
    PantoneColor(code="101 C", hex="#F7EA48", name="Bright Yellow"),
    PantoneColor(code="102 C", hex="#FCE300", name="Lemon Yellow"),
    PantoneColor(code="103 C", hex="#C5A900", name="Old Gold"),
    PantoneColor(code="104 C", hex="#AF9800", name="Golden Brown"),
    PantoneColor(code="105 C", hex="#897A27", name="Olive"),
    PantoneColor(code="109 C", hex="#FFD100", name="Golden Yellow"),
    PantoneColor(code="116 C", hex="#FFCD00", name="Mustard Yellow"),
    PantoneColor(code="123 C", hex="#FFC72C", name="Sunglow"),
    PantoneColor(code="130 C", hex="#F2A900", name="Tangerine Yellow"),
    PantoneColor(code="137 C", hex="#FFA300", name="Orange Peel"),
    PantoneColor(code="144 C", hex="#ED8B00", name="Pumpkin"),
    PantoneColor(code="151 C", hex="#FF8200", name="Orange"),
    PantoneColor(code="158 C", hex="#E57200", name="Tiger Orange"),
    PantoneColor(code="165 C", hex="#FF6720", name="Bright Orange"),
    PantoneColor(code="172 C", hex="#FA4616", name="Red Orange"),
    PantoneColor(code="179 C", hex="#E03C31", name="Vermillion Red"),
    PantoneColor(code="185 C", hex="#E4002B", name="Red"),
    PantoneColor(code="186 C", hex="#C8102E", name="True Red"),
    PantoneColor(code="192 C", hex="#E84E6C", name="Rose"),
    PantoneColor(code="199 C", hex="#D50032", name="Cardinal Red"),
    PantoneColor(code="206 C", hex="#D62598", name="Magenta"),
    PantoneColor(code="213 C", hex="#E21776", name="Pink"),
    PantoneColor(code="220 C", hex="#A50050", name="Burgundy"),
    PantoneColor(code="227 C", hex="#AD1457", name="Raspberry"),
    PantoneColor(code="234 C", hex="#AA0061", name="Deep Rose"),
    PantoneColor(code="241 C", hex="#AD1AAC", name="Purple"),
    PantoneColor(code="248 C", hex="#782F89", name="Violet"),
    PantoneColor(code="255 C", hex="#692F7F", name="Deep Purple"),
    PantoneColor(code="262 C", hex="#5C2D91", name="Royal Purple"),
    PantoneColor(code="269 C", hex="#6B2D5B", name="Plum"),
    PantoneColor(code="276 C", hex="#2E294E", name="Midnight"),
    PantoneColor(code="283 C", hex="#92C1E9", name="Sky Blue"),
    PantoneColor(code="290 C", hex="#C4D8E2", name="Powder Blue"),
    PantoneColor(code="297 C", hex="#00A3E0", name="Cyan"),
    PantoneColor(code="300 C", hex="#0050A0", name="Royal Blue"),
    PantoneColor(code="306 C", hex="#00B5E2", name="Turquoise"),
    PantoneColor(code="313 C", hex="#0093B2", name="Teal"),
    PantoneColor(code="320 C", hex="#009CA6", name="Peacock"),
    PantoneColor(code="327 C", hex="#008C82", name="Deep Teal"),
    PantoneColor(code="334 C", hex="#009775", name="Emerald"),
    PantoneColor(code="341 C", hex="#007A53", name="Green"),
    PantoneColor(code="348 C", hex="#00843D", name="Kelly Green"),
    PantoneColor(code="355 C", hex="#009639", name="Bright Green"),
    PantoneColor(code="362 C", hex="#4BA82E", name="Leaf Green"),
    PantoneColor(code="369 C", hex="#64A70B", name="Lime Green"),
    PantoneColor(code="376 C", hex="#84BD00", name="Yellow Green"),
    PantoneColor(code="383 C", hex="#A6A400", name="Olive Green"),
    PantoneColor(code="390 C", hex="#B5BD00", name="Chartreuse"),
    PantoneColor(code="397 C", hex="#C4C600", name="Lemon Lime"),
    PantoneColor(code="401 C", hex="#A49B8F", name="Warm Gray"),
    PantoneColor(code="408 C", hex="#857874", name="Medium Gray"),
    PantoneColor(code="415 C", hex="#6E7377", name="Cool Gray"),
    PantoneColor(code="420 C", hex="#C7C8C9", name="Silver"),
    PantoneColor(code="421 C", hex="#B1B3B6", name="Light Gray"),
    PantoneColor(code="422 C", hex="#9D9FA2", name="Gray"),
    PantoneColor(code="423 C", hex="#898C8E", name="Steel Gray"),
    PantoneColor(code="424 C", hex="#707372", name="Dark Gray"),
    PantoneColor(code="425 C", hex="#545454", name="Charcoal"),
    PantoneColor(code="426 C", hex="#25282A", name="Black"),
    PantoneColor(code="427 C", hex="#D0D3D4", name="Pearl Gray"),
    PantoneColor(code="428 C", hex="#C1C6C8", name="Platinum"),
    PantoneColor(code="429 C", hex="#A7AAAD", name="Pewter"),
    PantoneColor(code="430 C", hex="#858F93", name="Slate"),
    PantoneColor(code="431 C", hex="#5A6269", name="Graphite"),
    PantoneColor(code="432 C", hex="#333E48", name="Gunmetal"),
    PantoneColor(code="433 C", hex="#1E252B", name="Onyx"),
    PantoneColor(code="468 C", hex="#DDCBA4", name="Champagne"),
    PantoneColor(code="475 C", hex="#F1B091", name="Peach"),
    PantoneColor(code="482 C", hex="#C17E61", name="Terra Cotta"),
    PantoneColor(code="483 C", hex="#8A391B", name="Rust"),
    PantoneColor(code="4625 C", hex="#4F2C1D", name="Chocolate Brown"),
    PantoneColor(code="4695 C", hex="#3A2421", name="Coffee"),
    PantoneColor(code="470 C", hex="#99623B", name="Copper"),
    PantoneColor(code="471 C", hex="#6D4F47", name="Brown"),
    PantoneColor(code="476 C", hex="#503C3C", name="Dark Brown"),
    PantoneColor(code="478 C", hex="#3C2415", name="Espresso"),
    PantoneColor(code="485 C", hex="#DA291C", name="Scarlet"),
    PantoneColor(code="White", hex="#FFFFFF", name="White"),
    PantoneColor(code="Black C", hex="#2D2926", name="Process Black"),
)
