from heaven.settings import SchemaDict


SCHEMA: list[SchemaDict] = [
    {
        "key": "ui",
        "title": "User interface settings",
        "help": "Customize the look of the status panels and notifications.",
        "type": "object",
        "fields": [
            {
                "key": "theme",
                "title": "Theme",
                "help": "One of the builtin Textual themes.",
                "type": "choices",
                "default": "textual-dark",
                "choices": [
                    "catppuccin-latte",
                    "catppuccin-mocha",
                    "dracula",
                    "flexoki",
                    "gruvbox",
                    "monokai",
                    "nord",
                    "solarized-light",
                    "textual-dark",
                    "textual-light",
                    "tokyo-night",
                ],
            },
        ],
    },
    {
        "key": "logging",
        "title": "Logging settings",
        "help": "Logs are sent to the Textual devtools console.",
        "type": "object",
        "fields": [
            {
                "key": "level",
                "title": "Log level",
                "help": "Minimum level of messages to log.",
                "type": "choices",
                "default": "info",
                "choices": ["debug", "info", "warning", "error"],
            },
        ],
    },
]
