"""
Markdown REPL links: turn babel://, codepen://, codesandbox:// and ramda://
links into anchors that open the referenced example in an online playground.
"""

__version__ = "0.1.0"
