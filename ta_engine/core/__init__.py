"""Core infrastructure shared by the indicator engine."""

from .logger import EngineLogger, LogFormat, LogLevel, bind_logger_context, get_engine_logger

__all__ = ["EngineLogger", "LogFormat", "LogLevel", "bind_logger_context", "get_engine_logger"]
