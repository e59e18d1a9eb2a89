"""Core models, interfaces, settings and exceptions for gitstamp."""
