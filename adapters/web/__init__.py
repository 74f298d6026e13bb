"""
Web adapter - aiohttp app serving the EventHub pages.
"""
