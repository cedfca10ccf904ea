"""Agora: a social app built from independent concepts and synchronizations."""
