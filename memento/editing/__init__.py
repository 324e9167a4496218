"""
Entry editing.

- controller: Pure text transforms over an (text, selection) state
- session: Entry draft owning tags, attachments and local previews
"""
