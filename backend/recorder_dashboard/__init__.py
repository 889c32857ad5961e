"""
Recorder Dashboard - turns recorded Playwright code into project context.
"""

__version__ = "0.1.0"
