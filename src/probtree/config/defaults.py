"""
probtree.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "parse": {
        "starting_line_number": 0,
        "warnings": False,
    },
    "layout": {
        "sizer": "none",
        "base": 12.5,
        "char_width": 7.0,
        "line_height": 18.0,
        "wrap_width": 300.0,
    },
    "output": {
        "format": "json",
        "indent": 2,
    },
}

DEFAULT_CONFIG_TEMPLATE = """\
# probtree configuration

[parse]
# Added to every emitted line number
starting_line_number = 0
# Print parse warnings to stderr
warnings = false

[layout]
# "none" leaves sizing to the renderer; "estimate" measures labels
sizer = "none"
base = 12.5
char_width = 7.0
line_height = 18.0
wrap_width = 300.0

[output]
# "json" or "text"
format = "json"
indent = 2
"""
