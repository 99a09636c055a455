"""Media kinds of inscription content, and content types for files."""

from __future__ import annotations

import enum
import struct
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union


class Media(enum.Enum):
    AUDIO = "audio"
    IFRAME = "iframe"
    IMAGE = "image"
    MODEL = "model"
    PDF = "pdf"
    TEXT = "text"
    UNKNOWN = "unknown"
    VIDEO = "video"

    @classmethod
    def parse(cls, content_type: str) -> "Media":
        """Return the media kind for a known content type."""
        for known, media, _extensions in _TABLE:
            if known == content_type:
                return media
        raise ValueError(f"unknown content type: {content_type}")


_TABLE: Tuple[Tuple[str, Media, Tuple[str, ...]], ...] = (
    ("application/json", Media.TEXT, ("json",)),
    ("application/pdf", Media.PDF, ("pdf",)),
    ("application/pgp-signature", Media.TEXT, ("asc",)),
    ("application/yaml", Media.TEXT, ("yaml", "yml")),
    ("audio/flac", Media.AUDIO, ("flac",)),
    ("audio/mpeg", Media.AUDIO, ("mp3",)),
    ("audio/wav", Media.AUDIO, ("wav",)),
    ("image/apng", Media.IMAGE, ("apng",)),
    ("image/avif", Media.IMAGE, ()),
    ("image/gif", Media.IMAGE, ("gif",)),
    ("image/jpeg", Media.IMAGE, ("jpg", "jpeg")),
    ("image/png", Media.IMAGE, ("png",)),
    ("image/svg+xml", Media.IFRAME, ("svg",)),
    ("image/webp", Media.IMAGE, ("webp",)),
    ("model/gltf+json", Media.MODEL, ("gltf",)),
    ("model/gltf-binary", Media.MODEL, ("glb",)),
    ("model/stl", Media.UNKNOWN, ("stl",)),
    ("text/css", Media.TEXT, ("css",)),
    ("text/html", Media.IFRAME, ()),
    ("text/html;charset=utf-8", Media.IFRAME, ("html",)),
    ("text/javascript", Media.TEXT, ("js",)),
    ("text/markdown", Media.TEXT, ()),
    ("text/markdown;charset=utf-8", Media.TEXT, ("md",)),
    ("text/plain", Media.TEXT, ()),
    ("text/plain;charset=utf-8", Media.TEXT, ("txt",)),
    ("video/mp4", Media.VIDEO, ("mp4",)),
    ("video/webm", Media.VIDEO, ("webm",)),
)


def content_type_for_path(path: Union[str, Path]) -> str:
    """Content type for a file, chosen by its extension."""
    path = Path(path)
    suffix = path.suffix
    if not suffix:
        raise ValueError("file must have extension")
    extension = suffix[1:].lower()

    if extension == "mp4":
        check_mp4_codec(path)

    for content_type, _media, extensions in _TABLE:
        if extension in extensions:
            return content_type

    supported = sorted(extensions[0] for _, _, extensions in _TABLE if extensions)
    raise ValueError(
        f"unsupported file extension `.{extension}`, "
        f"supported extensions: {' '.join(supported)}"
    )


_CODEC_NAMES = {
    b"avc1": "h264",
    b"avc3": "h264",
    b"hev1": "h265",
    b"hvc1": "h265",
    b"vp09": "vp9",
    b"mp4a": "aac",
    b"tx3g": "ttxt",
}


def _boxes(data: bytes, start: int, end: int) -> Iterator[Tuple[bytes, int, int]]:
    pos = start
    while pos + 8 <= end:
        size, kind = struct.unpack(">I4s", data[pos : pos + 8])
        header = 8
        if size == 1:
            if pos + 16 > end:
                raise ValueError("truncated mp4 box header")
            (size,) = struct.unpack(">Q", data[pos + 8 : pos + 16])
            header = 16
        elif size == 0:
            size = end - pos
        if size < header or pos + size > end:
            raise ValueError(f"invalid mp4 box size for {kind!r}")
        yield kind, pos + header, pos + size
        pos += size


def _find(data: bytes, start: int, end: int, kind: bytes) -> Optional[Tuple[int, int]]:
    for found, body_start, body_end in _boxes(data, start, end):
        if found == kind:
            return body_start, body_end
    return None


def _require(data: bytes, span: Optional[Tuple[int, int]], kind: bytes) -> Tuple[int, int]:
    if span is None:
        raise ValueError(f"{kind.decode()} box not found")
    return span


def _track_codec(data: bytes, start: int, end: int) -> Optional[str]:
    """Codec name of a video track, or None if the track is not video."""
    mdia = _require(data, _find(data, start, end, b"mdia"), b"mdia")
    hdlr = _require(data, _find(data, *mdia, b"hdlr"), b"hdlr")
    if hdlr[1] - hdlr[0] < 12:
        raise ValueError("truncated hdlr box")
    if data[hdlr[0] + 8 : hdlr[0] + 12] != b"vide":
        return None
    minf = _require(data, _find(data, *mdia, b"minf"), b"minf")
    stbl = _require(data, _find(data, *minf, b"stbl"), b"stbl")
    stsd = _require(data, _find(data, *stbl, b"stsd"), b"stsd")
    for kind, _s, _e in _boxes(data, stsd[0] + 8, stsd[1]):
        return _CODEC_NAMES.get(kind, kind.decode("latin-1"))
    raise ValueError("stsd box has no sample entries")


def check_mp4_codec(path: Union[str, Path]) -> None:
    """Raise unless every video track of the MP4 file is H.264."""
    data = Path(path).read_bytes()
    _require(data, _find(data, 0, len(data), b"ftyp"), b"ftyp")
    moov = _require(data, _find(data, 0, len(data), b"moov"), b"moov")
    for kind, start, end in _boxes(data, *moov):
        if kind != b"trak":
            continue
        codec = _track_codec(data, start, end)
        if codec is not None and codec != "h264":
            raise ValueError(
                f"Unsupported video codec, only H.264 is supported in MP4: {codec}"
            )