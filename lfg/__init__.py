"""Agent-ready project bootstrapper and LLM context tooling."""

__version__ = "0.1.0"
