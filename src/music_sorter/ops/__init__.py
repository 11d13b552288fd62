"""File operations for the music sorter.

Submodules:
    library -- Destination path synthesis (Root/Artist/Album/Title.ext, pure
               string composition with no sanitization), recursive directory
               creation, and single-file copy with optional temp-name + rename
               atomicity. Filesystem failures surface as CopyError so the copy
               stage can count them per file.
"""
