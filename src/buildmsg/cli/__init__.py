# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Click command-line interface for BuildMsg."""
