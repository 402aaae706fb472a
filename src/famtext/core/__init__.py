"""
Orchestration layer: pipeline context, error taxonomy and the file pipeline.
"""
