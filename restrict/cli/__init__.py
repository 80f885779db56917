"""Command line interface for pyrestrict"""
