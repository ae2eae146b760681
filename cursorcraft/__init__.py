"""CursorCraft -- starter documents for new software projects.

A project configuration (name, description, platform, framework, packages)
is rendered into five Markdown documents: a PRD, a code-style guide, a
``.cursorrules`` file, a progress tracker and a README.  The ``store`` and
``service`` modules persist projects and their documents; ``cli`` exposes
generation on the command line.
"""

__version__ = "0.1.0"
