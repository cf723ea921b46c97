"""Bundled git hook scripts, installed verbatim into .git/hooks/."""
