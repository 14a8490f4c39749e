"""
Fraction Constants

Vulgar fraction glyphs used when parsing and displaying ingredient quantities.
"""

# (decimal value, glyph) pairs in ascending value order
FRACTION_TABLE = (
    (1/8, '\u215b'),   # ⅛
    (1/5, '\u2155'),   # ⅕
    (1/4, '\u00bc'),   # ¼
    (1/3, '\u2153'),   # ⅓
    (3/8, '\u215c'),   # ⅜
    (2/5, '\u2156'),   # ⅖
    (1/2, '\u00bd'),   # ½
    (3/5, '\u2157'),   # ⅗
    (5/8, '\u215d'),   # ⅝
    (2/3, '\u2154'),   # ⅔
    (3/4, '\u00be'),   # ¾
    (4/5, '\u2158'),   # ⅘
    (7/8, '\u215e'),   # ⅞
)

FRACTION_GLYPHS = ''.join(glyph for _, glyph in FRACTION_TABLE)

# Max distance at which a remainder is displayed as a glyph
SNAP_TOLERANCE = 0.01
