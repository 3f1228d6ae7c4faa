# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg CLI subcommands."""
