#!/usr/bin/env python3
"""
Startup script for the CDN invalidation Slack bot.
"""

import uvicorn
from cdn_bot.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    print("Starting CDN invalidation Slack bot...")
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"Debug: {settings.debug}")
    print(f"Distribution: {settings.cdn_distribution}")
    print(f"Log Level: {settings.log_level}")
    print("-" * 50)

    uvicorn.run(
        "cdn_bot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
