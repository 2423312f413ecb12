"""rnt-next - Next.js project generator.

Collects a handful of choices, scaffolds a base project with
create-next-app, installs dependencies and writes an opinionated
set of configuration files and components on top of it.
"""

__version__ = "0.3.0"
