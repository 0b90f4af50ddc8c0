"""Pydantic data models for the Vimeo API."""

from vimeo_client.models.category import Category, SubCategory
from vimeo_client.models.channel import Channel, ChannelRequest, Group, GroupRequest
from vimeo_client.models.collection import Album, AlbumRequest, Feed, Portfolio
from vimeo_client.models.common import (
    DataList,
    ErrorEnvelope,
    Pagination,
    Paging,
    Pictures,
    PictureSize,
    Privacy,
)
from vimeo_client.models.interaction import (
    Comment,
    CommentRequest,
    Credit,
    CreditRequest,
    PicturesRequest,
    TextTrack,
    TextTrackRequest,
)
from vimeo_client.models.metadata import ContentRating, CreativeCommon, Language, Tag
from vimeo_client.models.user import User, UserRequest, WebSite
from vimeo_client.models.video import (
    Domain,
    EmbedPresets,
    Preset,
    UploadTicket,
    UploadVideoOptions,
    Video,
    VideoRequest,
)

__all__ = [
    "Album",
    "AlbumRequest",
    "Category",
    "Channel",
    "ChannelRequest",
    "Comment",
    "CommentRequest",
    "ContentRating",
    "CreativeCommon",
    "Credit",
    "CreditRequest",
    "DataList",
    "Domain",
    "EmbedPresets",
    "ErrorEnvelope",
    "Feed",
    "Group",
    "GroupRequest",
    "Language",
    "Pagination",
    "Paging",
    "PictureSize",
    "Pictures",
    "PicturesRequest",
    "Portfolio",
    "Preset",
    "Privacy",
    "SubCategory",
    "Tag",
    "TextTrack",
    "TextTrackRequest",
    "UploadTicket",
    "UploadVideoOptions",
    "User",
    "UserRequest",
    "Video",
    "VideoRequest",
    "WebSite",
]
