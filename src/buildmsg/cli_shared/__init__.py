# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Click-independent helpers shared by the CLI and the console sink."""
