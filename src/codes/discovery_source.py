# src/codes/discovery_source.py
"""
How the customer heard about the product ("where did you find us?").

Collected with each order for reporting. Not used in any premium computation.
"""

from __future__ import annotations

from src.codes.code_enum import CodeEnum


class DiscoverySourceType(CodeEnum):
    INTERNET_SEARCH = (1, "Internet (search engine)")
    OFFICIAL_WEBSITE = (2, "Insurer's official website")
    COMPARISON_SITE = (3, "Comparison / review site")
    TV_RADIO_CM = (4, "TV or radio commercial")
    NEWSPAPER_MAGAZINE = (5, "Newspaper or magazine advert")
    SNS = (6, "Social media (Twitter, Instagram, Facebook, etc.)")
    YOUTUBE_VIDEO = (7, "YouTube advert / video site")
    INTRODUCED_BY_PERSON = (8, "Introduced by a friend or family member")
    AGENT = (9, "Insurance agent / sales representative")
    COMPANY_NOTICE = (10, "Notice from employer or workplace")
    POST_MAIL = (11, "Flyer or direct mail")
    EVENT = (12, "In-store or event booth")
    OTHER = (13, "Other")
