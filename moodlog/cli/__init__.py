"""
CLI Module.

Thin presentation layer over the notion service.

Architecture:
- Arguments are joined, split on half-width and full-width spaces, validated
- Page creation is delegated to moodlog.notion.service
- Results are printed to stdout, usage errors to stderr

Usage:
    moodlog 今日のタスク とても 疲れた
    python cli.py --verbose 会議 長かった
"""
