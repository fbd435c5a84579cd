import numpy as np

# sRGB transfer function
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4

# D65 reference white, Y normalized to 100
XYZ_SCALING = 100.0
D65_WHITE = np.array([95.047, 100.0, 108.883])

# Linear sRGB -> XYZ (D65)
M_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
M_XYZ_TO_SRGB = np.linalg.inv(M_SRGB_TO_XYZ)

# CIE constants for the L*a*b* compounding function
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27
LAB_DELTA = 6 / 29

# WCAG relative luminance weights (Rec. 709)
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
