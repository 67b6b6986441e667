"""Dataclasses for Telegram Bot API objects: media, payments, chat, markup and inline results."""