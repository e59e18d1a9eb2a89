"""Plugins for gitstamp."""
