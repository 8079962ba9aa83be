"""Example bid requests keyed by scenario name."""

from __future__ import annotations

import copy
import json
from types import MappingProxyType
from typing import Any

_SCHAIN = {
    "complete": 1,
    "ver": "1.0",
    "nodes": [{"asi": "exchange.example.com", "sid": "seller-1001", "hp": 1}],
}

_EIDS = [{"source": "id5-sync.com", "uids": [{"id": "ID5-7f3a9c", "atype": 1}]}]

_WEB_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
_IOS_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Mobile/15E148"
)
_ROKU_UA = "Roku/DVP-12.5 (12.5.0.4174-AE)"


def _site(page: str = "https://www.example.com/news/article-1") -> dict[str, Any]:
    return {
        "id": "site-42",
        "domain": "example.com",
        "page": page,
        "publisher": {"id": "pub-123", "name": "Example Media"},
    }


def _video(**overrides: Any) -> dict[str, Any]:
    video = {
        "mimes": ["video/mp4", "video/webm"],
        "minduration": 5,
        "maxduration": 60,
        "protocols": [2, 3, 5, 6, 7],
        "w": 1280,
        "h": 720,
        "startdelay": 0,
        "placement": 1,
        "linearity": 1,
        "playbackmethod": [1],
        "pos": 1,
    }
    video.update(overrides)
    return video


def _source() -> dict[str, Any]:
    return {"tid": "tx-5f1c", "schain": copy.deepcopy(_SCHAIN)}


def _user(**ext: Any) -> dict[str, Any]:
    user: dict[str, Any] = {"id": "user-8841", "buyeruid": "dsp-uid-5521", "eids": copy.deepcopy(_EIDS)}
    if ext:
        user["ext"] = dict(ext)
    return user


def _device(**overrides: Any) -> dict[str, Any]:
    device = {
        "ua": _WEB_UA,
        "ip": "203.0.113.45",
        "geo": {"country": "USA", "region": "CA", "city": "Los Angeles"},
        "make": "Apple",
        "model": "MacBookPro",
        "os": "macOS",
        "devicetype": 2,
        "ifa": "6d92078a-8246-4ba4-ae5b-76104861e7dc",
        "lmt": 0,
        "ext": {"is_app": 0},
    }
    device.update(overrides)
    return device


_DISPLAY_SITE: dict[str, Any] = {
    "id": "req-display-001",
    "at": 1,
    "tmax": 300,
    "test": 0,
    "cur": ["USD"],
    "imp": [
        {
            "id": "1",
            "banner": {"w": 300, "h": 250, "format": [{"w": 300, "h": 250}, {"w": 320, "h": 50}]},
            "bidfloor": 0.5,
            "bidfloorcur": "USD",
            "secure": 1,
        }
    ],
    "site": _site(),
    "device": _device(),
    "user": _user(),
    "source": _source(),
    "regs": {"coppa": 0, "ext": {"gdpr": 0}},
}

_VIDEO_APP: dict[str, Any] = {
    "id": "req-video-001",
    "at": 1,
    "tmax": 500,
    "imp": [
        {
            "id": "1",
            "video": _video(),
            "bidfloor": 2.5,
            "bidfloorcur": "USD",
            "secure": 1,
            "ext": {"wopv": 1},
        }
    ],
    "app": {
        "id": "app-001",
        "name": "Example Video",
        "bundle": "123456789",
        "storeurl": "https://apps.apple.com/us/app/id123456789",
        "publisher": {"id": "pub-456"},
    },
    "device": _device(
        ua=_IOS_UA,
        make="Apple",
        model="iPhone",
        os="iOS",
        devicetype=4,
        ext={"is_app": 1},
    ),
    "user": _user(),
    "source": _source(),
    "regs": {"coppa": 0},
}

_NATIVE_REQUEST = {
    "ver": "1.2",
    "assets": [
        {"id": 1, "required": 1, "title": {"len": 90}},
        {"id": 2, "required": 1, "img": {"type": 3, "w": 1200, "h": 627}},
        {"id": 3, "data": {"type": 2, "len": 140}},
    ],
}

_NATIVE_APP: dict[str, Any] = {
    "id": "req-native-001",
    "at": 1,
    "tmax": 300,
    "imp": [
        {
            "id": "1",
            "native": {"request": json.dumps(_NATIVE_REQUEST), "ver": "1.2"},
            "bidfloor": 1.0,
            "bidfloorcur": "USD",
        }
    ],
    "app": {
        "id": "app-002",
        "bundle": "com.example.news",
        "storeurl": "https://play.google.com/store/apps/details?id=com.example.news",
        "publisher": {"id": "pub-789"},
    },
    "device": _device(
        ua="Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 (KHTML, like Gecko)",
        make="Google",
        model="Pixel 8",
        os="Android",
        devicetype=4,
        ext={"is_app": 1},
    ),
    "user": _user(),
    "source": _source(),
}

_CTV_APP: dict[str, Any] = {
    "id": "req-ctv-001",
    "at": 1,
    "tmax": 800,
    "imp": [
        {
            "id": "1",
            "video": _video(w=1920, h=1080, pos=7, maxduration=120),
            "bidfloor": 12.0,
            "bidfloorcur": "USD",
            "ext": {"wopv": 1},
        }
    ],
    "app": {
        "id": "app-ctv-77",
        "name": "Example Channel",
        "bundle": "12345",
        "storeurl": "https://channelstore.roku.com/details/12345/example-channel",
        "publisher": {"id": "pub-ctv-1"},
    },
    "device": _device(
        ua=_ROKU_UA,
        make="Roku",
        model="Ultra",
        os="Roku OS",
        devicetype=5,
        ext={"is_app": 1},
    ),
    "user": _user(),
    "source": _source(),
    "ext": {"auctionDatacenterId": 12},
}

_DOOH: dict[str, Any] = {
    "id": "req-dooh-001",
    "at": 1,
    "tmax": 1000,
    "imp": [
        {
            "id": "1",
            "banner": {"w": 1920, "h": 1080},
            "bidfloor": 5.0,
            "bidfloorcur": "USD",
        }
    ],
    "site": _site("https://screens.example.com/airport/terminal-2"),
    "dooh": {"id": "venue-network-9", "venuetype": ["transit_airports"], "venuetypetax": 1},
    "device": _device(
        ua="DOOH-Player/3.2",
        make="Samsung",
        model="QM55R",
        os="Tizen",
        devicetype=6,
    ),
    "user": _user(),
    "source": _source(),
}

_AD_POD: dict[str, Any] = {
    "id": "req-pod-001",
    "at": 1,
    "tmax": 800,
    "imp": [
        {
            "id": str(slot),
            "video": _video(
                w=1920, h=1080, pos=7, podid="pod-1", podseq=1, slotinpod=slot, poddur=60, maxduration=90
            ),
            "bidfloor": 10.0,
            "bidfloorcur": "USD",
            "ext": {"wopv": 1},
        }
        for slot in (1, 2)
    ],
    "app": copy.deepcopy(_CTV_APP["app"]),
    "device": copy.deepcopy(_CTV_APP["device"]),
    "user": _user(),
    "source": _source(),
}

_GDPR_MISSING_CONSENT: dict[str, Any] = {
    **copy.deepcopy(_DISPLAY_SITE),
    "id": "req-gdpr-001",
    "device": _device(geo={"country": "FRA", "city": "Paris"}),
    "regs": {"coppa": 0, "ext": {"gdpr": 1}},
    "user": _user(),
}

EXAMPLES = MappingProxyType(
    {
        "display_site": _DISPLAY_SITE,
        "video_app": _VIDEO_APP,
        "native_app": _NATIVE_APP,
        "ctv_app": _CTV_APP,
        "dooh": _DOOH,
        "ad_pod": _AD_POD,
        "gdpr_missing_consent": _GDPR_MISSING_CONSENT,
    }
)


def list_examples() -> list[str]:
    return sorted(EXAMPLES.keys())


def get_example(name: str) -> dict[str, Any]:
    """Return a fresh copy of the named example payload."""
    normalized = str(name).strip().lower()
    example = EXAMPLES.get(normalized)
    if example is None:
        raise KeyError(f"Unknown example: {normalized}")
    return copy.deepcopy(example)


__all__ = ["EXAMPLES", "get_example", "list_examples"]
