"""
Web font configuration.

Defines copied formats, generated flavors, and the manifest directive layout.
"""

# Formats copied from the font source tree to dist/
FONT_EXTENSIONS = (".svg", ".eot", ".ttf", ".woff", ".woff2")

# Flavors generated from each .ttf source (fontTools TTFont.flavor values)
WEBFONT_FLAVORS = ("woff", "woff2")

# Every family is emitted as a regular-weight face
DEFAULT_WEIGHT = 400

# Relative URL from dist/assets/css to dist/assets/fonts
DEFAULT_URL_PREFIX = "../fonts/"

# One manifest line: font path, family name, weight
DIRECTIVE_TEMPLATE = '@include font-face("{path}", "{family}", {weight});\n'
