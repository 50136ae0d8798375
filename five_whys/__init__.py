"""Five Whys: stateful root cause analysis for conversational agents."""

__version__ = "1.0.6"
