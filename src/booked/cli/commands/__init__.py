# ABOUTME: Subcommand modules for the Booked CLI.
# ABOUTME: Each module defines one command or command group.
