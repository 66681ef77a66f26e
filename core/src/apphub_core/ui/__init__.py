"""Server-rendered launcher page.

One page, rebuilt on every request:
- scans the apps root for subdirectories with an index.html
- renders a tile per app with Jinja2 (autoescaped)

There is no client-side script and no per-user state.
"""
