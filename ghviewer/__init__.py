"""
gh-viewer - Terminal summary of your open GitHub pull requests.

A CLI tool that:
1. Lists your open PRs through the GitHub CLI (gh)
2. Classifies each PR's CI status from its check runs
3. Shows which reviewers you are still waiting for
4. Opens a PR in the browser by its list number

Usage:
    ghviewer                # Same as `ghviewer view`
    ghviewer view           # Colorized summary of open PRs
    ghviewer view --json    # Machine-readable summary
    ghviewer open 2         # Open the second listed PR in a browser
"""

__version__ = "0.1.0"
__author__ = "gh-viewer"
