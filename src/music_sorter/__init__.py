"""Music Sorter -- copy a tree of audio files into Artist/Album/Title folders by tag.

Core modules:
    config     -- Configuration via pydantic-settings (MUSIC_SORTER_* env vars,
                  optional .env) and loguru setup with a rotating file sink.
    cli        -- Click CLI entry point. Prompts for missing folders and offers to
                  create a missing destination. CLI flags passed as kwargs to
                  SorterConfig (no env pollution).
    runner     -- Root validation and strict stage-by-stage execution over one
                  RunContext; returns the merged RunStats.
    models     -- Stage/CopyOutcome enums, AudioFile, TagProbe, RunStats, RunContext.
    pathcheck  -- Directory/file existence checks that treat symlinks as absent.
    tagreader  -- mutagen-backed tag probe. Audio-ness means "mutagen opens it".
    sanitize   -- Optional path-segment cleanup for tag values.

Subpackages:
    stages -- Pipeline stages (scan, extract, copy, report)
    ops    -- Destination path synthesis and file copying
"""
