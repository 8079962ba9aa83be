"""Static reference data: app store URL shapes, data centers and geography.

All tables are built once at import time and exposed read-only. Compiled
``re`` patterns are stateless, so they are safe to share between concurrent
validations.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class StorePattern:
    key: str
    platform: str
    url_patterns: tuple[re.Pattern[str], ...]
    bundle_pattern: re.Pattern[str]


@dataclass(frozen=True)
class DataCenter:
    id: int
    name: str
    technical: str
    continent: str | None
    city: str


def _store(key: str, platform: str, urls: tuple[str, ...], bundle: str) -> StorePattern:
    # Every URL pattern captures the store identifier in the ``app_id`` group.
    return StorePattern(
        key=key,
        platform=platform,
        url_patterns=tuple(re.compile(pattern) for pattern in urls),
        bundle_pattern=re.compile(bundle),
    )


# Order matters: the first platform whose URL pattern matches wins.
STORE_URL_PATTERNS: tuple[StorePattern, ...] = (
    _store(
        "ios",
        "iOS/tvOS",
        (
            r"https://apps\.apple\.com/.*/app/.*/id(?P<app_id>\d+)",
            r"https://apps\.apple\.com/app/id(?P<app_id>\d+)",
            r"https://apps\.apple\.com/us/app/id(?P<app_id>\d+)",
        ),
        r"\d+",
    ),
    _store(
        "android",
        "Android/AndroidTV",
        (r"https://play\.google\.com/store/apps/details\?id=(?P<app_id>[a-zA-Z0-9._]+)",),
        r"[a-zA-Z0-9._]+",
    ),
    _store(
        "roku",
        "Roku OS",
        (
            r"https://channelstore\.roku\.com/details/(?P<app_id>[a-zA-Z0-9]+)/.*",
            r"https://channelstore\.roku\.com/details/(?P<app_id>\d+)/?",
        ),
        r"\d+",
    ),
    _store(
        "amazon",
        "Fire OS",
        (
            r"https://www\.amazon\.com/.*/dp/(?P<app_id>[A-Z0-9]+)",
            r"https://www\.amazon\.com/dp/(?P<app_id>[A-Z0-9]+)",
        ),
        r"[A-Z0-9]+",
    ),
    _store(
        "microsoft",
        "Microsoft",
        (
            r"https://www\.microsoft\.com/.*/p/.*/(?P<app_id>[a-z0-9]+)",
            r"https://www\.microsoft\.com/p/.*/(?P<app_id>[a-z0-9]+)",
        ),
        r"[a-z0-9]+",
    ),
    _store(
        "samsung",
        "Tizen",
        (r"https://www\.samsung\.com/us/appstore/app/(?P<app_id>G\d+)",),
        r"G\d+",
    ),
    _store(
        "lg",
        "WebOS",
        (
            r"https://us\.lgappstv\.com/main/tvapp/detail\?appId=(?P<app_id>\d+)",
            r"https://fr\.lgappstv\.com/main/tvapp/detail\?appId=(?P<app_id>\d+)",
        ),
        r"\d+",
    ),
    _store(
        "playstation",
        "Orbis OS",
        (r"https://store\.playstation\.com/en-us/product/(?P<app_id>[A-Z0-9_-]+)",),
        r"[A-Z0-9_-]+",
    ),
    _store(
        "vizio",
        "SmartCast",
        (r"https://www\.vizio\.com/smart-tv-apps\?appName=[a-zA-Z0-9]+&appId=(?P<app_id>vizio\.[a-zA-Z0-9]+)",),
        r"vizio\.[a-zA-Z0-9]+",
    ),
    _store(
        "philips",
        "AndroidTV",
        (r"https://www\.zeasn\.tv/whaleeco/appstore/detail\?appid=(?P<app_id>\d+)",),
        r"\d+",
    ),
    _store(
        "huawei",
        "HarmonyOS",
        (r"https://appgallery\.huawei\.com/#/app/(?P<app_id>C\d+)",),
        r"C\d+",
    ),
)

STORE_PLATFORM_KEYS: tuple[str, ...] = tuple(store.key for store in STORE_URL_PATTERNS)

DATA_CENTERS: tuple[DataCenter, ...] = (
    DataCenter(2, "Telecity", "", None, ""),
    DataCenter(3, "Equinix", "eqx", "Europe", "St Denis, Paris Area, FR"),
    DataCenter(4, "Interxion5", "itx5", "Europe", "Velizy, Paris Area, FR"),
    DataCenter(5, "Terremark", "tmk", "Americas", "Miami, Florida, US"),
    DataCenter(6, "Interxion4", "itx4", "Europe", "Velizy, Paris Area, FR"),
    DataCenter(7, "China", "", "Asia", ""),
    DataCenter(8, "Apac", "sgp", "Asia", "Singapore, SG"),
    DataCenter(10, "USW1", "usw1", "Americas", "Los Angeles, CA, US"),
    DataCenter(11, "EUW1", "euw1", "Europe", "Amsterdam, NL"),
    DataCenter(12, "USE1", "use1", "Americas", "Washington, US"),
    DataCenter(13, "APAC1", "apac1", "Asia", "Singapore, SG"),
    DataCenter(14, "EUW2", "euw2", "Europe", "Gravelines, hauts-de-france, FR"),
    DataCenter(15, "EUW3-DATA", "euw3-data", "Europe", ""),
    DataCenter(16, "USE2", "use2", "Americas", "Warrenton, VA, US"),
)

DATA_CENTERS_BY_ID = MappingProxyType({dc.id: dc for dc in DATA_CENTERS})

_CONTINENT_COUNTRIES: dict[str, str] = {
    "Africa": (
        "AGO BDI BEN BFA BWA CAF CIV CMR COD COG COM CPV DJI DZA EGY ERI ESH ETH "
        "GAB GHA GIN GMB GNB GNQ KEN LBR LBY LSO MAR MDG MLI MOZ MRT MUS MWI MYT "
        "NAM NER NGA REU RWA SDN SEN SHN SLE SOM STP SWZ SYC TCD TGO TUN TZA UGA "
        "ZAF ZMB ZWE"
    ),
    "Americas": (
        "ABW AIA ARG ATG BHS BLZ BMU BOL BRA BRB CAN CHL COL CRI CUB CYM DMA DOM "
        "ECU FLK GLP GRD GRL GTM GUF GUY HND HTI JAM KNA LCA MEX MSR MTQ NIC PAN "
        "PER PRI PRY SLV SPM SUR TCA TTO URY USA VCT VEN VGB VIR"
    ),
    "Asia": (
        "AFG ARE ARM AZE BGD BHR BRN BTN CCK CHN CXR CYP GEO IDN IND IRN IRQ ISR "
        "JOR JPN KAZ KGZ KHM KOR KWT LAO LBN LKA MDV MMR MNG MYS NPL OMN PAK PHL "
        "PRK QAT RUS SAU SGP SYR THA TJK TKM TUR TWN UZB VNM YEM"
    ),
    "Europe": (
        "ALB AND AUT BEL BGR BIH BLR CHE CZE DEU DNK ESP EST FIN FRA FRO GBR GIB "
        "GRC HRV HUN IRL ISL ITA LIE LTU LUX LVA MCO MDA MKD MLT NLD NOR POL PRT "
        "ROU SJM SMR SVK SVN SWE UKR VAT"
    ),
    "Oceania": (
        "ASM AUS COK FJI FSM GUM KIR MHL MNP NCL NFK NIU NRU NZL PCN PLW PNG PYF "
        "SLB TKL TON TUV VUT WLF WSM"
    ),
}

COUNTRY_CONTINENTS = MappingProxyType(
    {
        country: continent
        for continent, countries in _CONTINENT_COUNTRIES.items()
        for country in countries.split()
    }
)


def find_data_center(datacenter_id: object) -> DataCenter | None:
    if isinstance(datacenter_id, bool) or not isinstance(datacenter_id, (int, float)):
        return None
    return DATA_CENTERS_BY_ID.get(datacenter_id)


def continent_for_country(country: object) -> str | None:
    if not isinstance(country, str):
        return None
    return COUNTRY_CONTINENTS.get(country)


__all__ = [
    "COUNTRY_CONTINENTS",
    "DATA_CENTERS",
    "DATA_CENTERS_BY_ID",
    "DataCenter",
    "STORE_PLATFORM_KEYS",
    "STORE_URL_PATTERNS",
    "StorePattern",
    "continent_for_country",
    "find_data_center",
]
