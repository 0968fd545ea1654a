"""Command-line interface for semcmp"""
