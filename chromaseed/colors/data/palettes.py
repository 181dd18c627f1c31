"""
Our data: curated foreground/background pairs, packed 0xRRGGBB.
Order matters: Palette.pick(index) addresses rows by position.
"""
# Each entry is (foreground, background)
PALETTES: tuple[tuple[int, int], ...] = (
    # #EA2F20 on #130825
    (0xEA2F20, 0x130825),
    # #93C2AB on #09474D
    (0x93C2AB, 0x09474D),
    # #09474D on #93C2AB (inverse of the previous row)
    (0x09474D, 0x93C2AB),
    # #6974CC on #0D040F
    (0x6974CC, 0x0D040F),
    # #90A3AD on #0F2B15
    (0x90A3AD, 0x0F2B15),
    # #8A8092 on #3E0416
    (0x8A8092, 0x3E0416),
)

PALETTE_LENGTH = len(PALETTES)
