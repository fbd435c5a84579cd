# Reference values: unit RGB -> (hue degrees, unit saturation, unit lightness/brightness)

samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.5, 0.25, 0.25): (0.0, 1 / 3, 0.375),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_hsb = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.25): (0.0, 0.5, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (1.0, 0.5, 0.0): (0.0, 0.5, 1.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
}

# 0-255 channels -> CSS Color 4 name
samples_named = {
    (255, 99, 71): "tomato",
    (47, 79, 79): "darkslategray",
    (102, 51, 153): "rebeccapurple",
    (0, 0, 128): "navy",
    (255, 255, 255): "white",
}
