"""PromptLab: prompt design practice backend."""

__version__ = "0.1.0"
