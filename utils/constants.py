"""Fixed kernels, color matrices and rendering geometry."""

import numpy as np

# 3x3 Gaussian-like blur
BLUR_KERNEL = np.array([
    [1 / 16, 1 / 8, 1 / 16],
    [1 / 8,  1 / 4, 1 / 8],
    [1 / 16, 1 / 8, 1 / 16],
], dtype=np.float64)

# 5x5 sharpen: negative ring around a positive 3x3 core
SHARPEN_KERNEL = np.array([
    [-1 / 8, -1 / 8, -1 / 8, -1 / 8, -1 / 8],
    [-1 / 8,  1 / 4,  1 / 4,  1 / 4, -1 / 8],
    [-1 / 8,  1 / 4,  1 / 4,  1 / 4, -1 / 8],
    [-1 / 8,  1 / 4,  1 / 4,  1 / 4, -1 / 8],
    [-1 / 8, -1 / 8, -1 / 8, -1 / 8, -1 / 8],
], dtype=np.float64)
BLUR_KERNEL.flags.writeable = False
SHARPEN_KERNEL.flags.writeable = False

# Rec. 709 luma
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Rows produce R', G', B'
SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float64)
SEPIA_MATRIX.flags.writeable = False

# Histogram rendering
HISTOGRAM_BINS = 256
HISTOGRAM_SIZE = 256
HISTOGRAM_GRID_SPACING = 32
HISTOGRAM_BACKGROUND = (255, 255, 255)
HISTOGRAM_GRID_COLOR = (200, 200, 200)
HISTOGRAM_CHANNEL_COLORS = ((255, 0, 0), (0, 255, 0), (0, 0, 255))

# Color correction ignores near-black/near-white peaks
PEAK_SEARCH_RANGE = (10, 245)

# Levels: output values for the black, mid and white anchors
LEVELS_TARGETS = (0.0, 128.0, 255.0)
LEVELS_PRESET = (0, 128, 255)
