"""
Notion Integration.

Builds page-creation payloads and submits them to the Notion pages endpoint.
"""
