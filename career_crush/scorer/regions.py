"""Built-in region table used for location matching (region -> cities/states)."""

from types import MappingProxyType
from typing import Mapping, Tuple

REGION_MAPPING: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "south": (
        "memphis", "nashville", "atlanta", "miami", "tampa", "orlando", "jacksonville",
        "charlotte", "raleigh", "durham", "greensboro", "winston-salem",
        "dallas", "houston", "austin", "san antonio", "fort worth",
        "new orleans", "baton rouge", "birmingham", "montgomery",
        "louisville", "lexington", "little rock", "oklahoma city", "tulsa",
        "richmond", "virginia beach", "norfolk", "charleston", "columbia",
        "savannah", "knoxville", "chattanooga", "jackson", "mobile",
        # states
        "tennessee", "tn", "georgia", "ga", "florida", "fl", "north carolina", "nc",
        "south carolina", "sc", "texas", "tx", "louisiana", "la", "alabama", "al",
        "kentucky", "ky", "arkansas", "ar", "oklahoma", "ok", "virginia", "va",
        "mississippi", "ms", "west virginia", "wv",
    ),
    "northeast": (
        "new york", "nyc", "manhattan", "brooklyn", "boston", "philadelphia", "pittsburgh",
        "baltimore", "washington", "dc", "d.c.", "newark", "jersey city", "hartford",
        "providence", "buffalo", "rochester", "syracuse", "albany", "portland",
        # states
        "ny", "massachusetts", "ma", "pennsylvania", "pa", "new jersey", "nj",
        "maryland", "md", "connecticut", "ct", "rhode island", "ri", "vermont", "vt",
        "new hampshire", "nh", "maine", "me", "delaware", "de",
    ),
    "midwest": (
        "chicago", "detroit", "indianapolis", "columbus", "cleveland", "cincinnati",
        "milwaukee", "minneapolis", "st. paul", "st louis", "kansas city", "omaha",
        "des moines", "madison", "grand rapids", "ann arbor", "dayton", "toledo",
        "akron", "fargo", "sioux falls", "wichita", "lincoln", "topeka",
        # states
        "illinois", "il", "michigan", "mi", "ohio", "oh", "indiana", "in",
        "wisconsin", "wi", "minnesota", "mn", "missouri", "mo", "iowa", "ia",
        "kansas", "ks", "nebraska", "ne", "north dakota", "nd", "south dakota", "sd",
    ),
    "west": (
        "los angeles", "la", "san francisco", "sf", "san diego", "san jose", "seattle",
        "portland", "denver", "phoenix", "las vegas", "salt lake city", "sacramento",
        "oakland", "fresno", "long beach", "anaheim", "irvine", "tucson", "albuquerque",
        "colorado springs", "aurora", "boise", "spokane", "tacoma", "reno", "henderson",
        "honolulu", "anchorage",
        # states
        "california", "ca", "washington", "wa", "oregon", "or", "colorado", "co",
        "arizona", "az", "nevada", "nv", "utah", "ut", "new mexico", "nm",
        "idaho", "id", "montana", "mt", "wyoming", "wy", "hawaii", "hi", "alaska", "ak",
    ),
    "bay area": (
        "san francisco", "sf", "oakland", "san jose", "palo alto", "mountain view",
        "sunnyvale", "santa clara", "fremont", "hayward", "berkeley", "redwood city",
        "menlo park", "cupertino", "milpitas", "pleasanton", "walnut creek", "concord",
    ),
    "silicon valley": (
        "san jose", "palo alto", "mountain view", "sunnyvale", "santa clara",
        "cupertino", "menlo park", "redwood city", "milpitas", "fremont",
    ),
    "new york metro": (
        "new york", "nyc", "manhattan", "brooklyn", "queens", "bronx", "staten island",
        "jersey city", "newark", "hoboken", "yonkers", "white plains", "stamford",
    ),
    "dc metro": (
        "washington", "dc", "d.c.", "arlington", "alexandria", "bethesda", "silver spring",
        "reston", "tysons", "fairfax", "rockville", "college park",
    ),
})
