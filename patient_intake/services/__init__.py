"""
Service layer: intake submission, PDF rendering, patient listing
"""
