"""zbundle subcommands; each module exposes `register(app)`."""
