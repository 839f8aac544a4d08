"""
Terminal-side glue for the chat client's event vocabulary.

This package turns Textual input events into the client's Event values so the
UI loop and keymap only ever see one event type.
"""
