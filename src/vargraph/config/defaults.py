"""
vargraph.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "storage": {
        "path": ".vargraph/graphs.json",
    },
    "palette": {
        "samples": ["red", "green", "blue", "yellow", "orange", "purple"],
        "default": "transparent",
    },
    "suggest": {
        "limit": 20,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5001,
    },
}
