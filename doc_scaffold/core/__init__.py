"""Scaffold tasks and the init orchestrator."""
