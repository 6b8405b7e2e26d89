"""
CDN Invalidation Slack Bot

A small FastAPI application that provides:
- Slack Events API webhook handling
- An `invalidate_cdn` command that purges a CloudFront distribution
- An AWS Lambda entry point for API Gateway deployments
"""

__version__ = "1.0.0"
__description__ = "Slack bot that invalidates a CloudFront distribution on request"
