"""Core domain package for spotrelay.

Core holds link classification and the track/playlist relay flow without any
HTTP, Telegram, or fabdl-specific code, keeping the business logic portable.
"""
