"""sinkpick - pick the default audio sink from the terminal.

Lists the sinks WirePlumber knows about (via ``wpctl status``), lets the user
choose one in a Textual list and makes it the default with
``wpctl set-default``.
"""

__version__ = "0.1.0"
