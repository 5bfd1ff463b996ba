"""Shared configuration, types and value codecs."""
