"""Building blocks for Telegram bots: string and file tools, HTTP messages, clients, servers, long polling and data types."""

__version__ = "0.1.0"