"""Video data models and the request bodies used to edit or upload videos."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from vimeo_client.models.common import Pictures, Privacy, id_from_uri
from vimeo_client.models.metadata import Tag
from vimeo_client.models.user import User


class Embed(BaseModel):
    html: str | None = None


class Stats(BaseModel):
    plays: int | None = None


class File(BaseModel):
    """A downloadable rendition of a video."""

    quality: str | None = None
    type: str | None = None
    width: int | None = None
    height: int | None = None
    link: str | None = None
    created_time: datetime | None = None
    fps: float | None = None
    size: int | None = None
    md5: str | None = None
    link_secure: str | None = None


class App(BaseModel):
    uri: str | None = None
    name: str | None = None


class Buttons(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    like: bool = False
    watchlater: bool = False
    share: bool = False
    embed: bool = False
    vote: bool = False
    hd: bool = Field(default=False, alias="HD")


class Logos(BaseModel):
    vimeo: bool = False
    custom: bool = False
    sticky_custom: bool = False


class _EmbedFlags(BaseModel):
    badge: bool | None = None
    byline_badge: bool | None = None
    collections_button: bool | None = None
    playbar: bool | None = None
    volume: bool | None = None
    fullscreen_button: bool | None = None
    scaling_button: bool | None = None
    autoplay: bool | None = None
    autopause: bool | None = None
    loop: bool | None = None
    color: str | None = None
    link: bool | None = None
    overlay_email_capture: int | None = None
    overlay_email_capture_text: str | None = None
    overlay_email_capture_confirmation: str | None = None


class EmbedSettings(_EmbedFlags):
    buttons: Buttons | None = None
    logos: Logos | None = None
    outro: str | None = None
    portrait: str | None = None
    title: str | None = None
    byline: str | None = None


class EmbedPresets(BaseModel):
    uri: str | None = None
    name: str | None = None
    settings: EmbedSettings | None = None
    user: User | None = None


class Video(BaseModel):
    """A video."""

    uri: str | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    language: str | None = None
    embed: Embed | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    release_time: datetime | None = None
    content_rating: list[str] = Field(default_factory=list)
    license: str | None = None
    privacy: Privacy | None = None
    pictures: Pictures | None = None
    tags: list[Tag] = Field(default_factory=list)
    stats: Stats | None = None
    user: User | None = None
    files: list[File] = Field(default_factory=list)
    app: App | None = None
    status: str | None = None
    resource_key: str | None = None
    embed_presets: EmbedPresets | None = None

    @property
    def id(self) -> int:
        """Numeric video ID taken from the URI, or 0 when it has none."""
        try:
            return int(id_from_uri(self.uri))
        except ValueError:
            return 0


class TitleRequest(BaseModel):
    owner: str | None = None
    portrait: str | None = None
    name: str | None = None


class RatingsRequest(BaseModel):
    tv: str | None = None
    mpaa: str | None = None


class ExtraLinksRequest(BaseModel):
    imdb: str | None = None
    rotten_tomatoes: str | None = None


class EmbedRequest(_EmbedFlags):
    buttons: Buttons | None = None
    logos: Logos | None = None
    outro: str | None = None
    portrait: str | None = None
    title: TitleRequest | None = None
    byline: str | None = None
    ratings: RatingsRequest | None = None
    external_links: ExtraLinksRequest | None = None


class VideoRequest(BaseModel):
    """Body of a request to edit a video."""

    name: str | None = None
    description: str | None = None
    license: str | None = None
    privacy: Privacy | None = None
    password: str | None = None
    review_link: bool | None = None
    locale: str | None = None
    content_rating: list[str] | None = None
    embed: EmbedRequest | None = None


class UploadVideoOptions(BaseModel):
    """Body of an upload ticket request (``streaming``) or a pull upload."""

    type: str | None = None
    link: str | None = None


class UploadTicket(BaseModel):
    """Upload ticket handed out before the file bytes are sent."""

    uri: str | None = None
    ticket_id: str | None = None
    user: User | None = None
    upload_link: str | None = None
    upload_link_secure: str | None = None
    complete_uri: str | None = None


class Domain(BaseModel):
    """A domain the video may be embedded on."""

    uri: str | None = None
    name: str | None = None


class Preset(BaseModel):
    """An embed preset."""

    uri: str | None = None
    name: str | None = None
