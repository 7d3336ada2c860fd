"""
About Us Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional

DEFAULT_TITLE = "Welcome to JB HeartFelt Tours"
DEFAULT_STORY = (
    "At JB HeartFelt Tours, we craft unforgettable travel experiences filled with "
    "warmth, adventure, and connection. Our passion is to share the beauty of the "
    "world with you, one heartfelt journey at a time."
)


class AboutContent(BaseModel):
    """About Us page content"""
    title: str = Field(default=DEFAULT_TITLE, min_length=1)
    story: str = Field(default=DEFAULT_STORY, min_length=1)
    image_url: Optional[str] = None
