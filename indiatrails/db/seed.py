"""
Static lookup rows inserted by the initial migration (and by the test fixtures).
Ids are fixed so clients can rely on them across environments.
"""

import uuid

EASY_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
MEDIUM_ID = uuid.UUID("22222222-2222-2222-2222-222222222222")
HARD_ID = uuid.UUID("33333333-3333-3333-3333-333333333333")

DIFFICULTIES = [
    {"id": EASY_ID, "name": "Easy"},
    {"id": MEDIUM_ID, "name": "Medium"},
    {"id": HARD_ID, "name": "Hard"},
]

_PEXELS = "https://images.pexels.com/photos/{0}/pexels-photo-{0}.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"

REGIONS = [
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa1"),
        "code": "HP",
        "name": "Himachal Pradesh",
        "region_image_url": _PEXELS.format(674010),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa2"),
        "code": "UK",
        "name": "Uttarakhand",
        "region_image_url": _PEXELS.format(5334653),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa3"),
        "code": "LD",
        "name": "Ladakh",
        "region_image_url": _PEXELS.format(1566435),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa4"),
        "code": "SK",
        "name": "Sikkim",
        "region_image_url": _PEXELS.format(1547613),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa5"),
        "code": "AR",
        "name": "Arunachal Pradesh",
        "region_image_url": _PEXELS.format(1868778),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa6"),
        "code": "KL",
        "name": "Kerala",
        "region_image_url": _PEXELS.format(248062),
    },
    {
        "id": uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa7"),
        "code": "GA",
        "name": "Goa",
        "region_image_url": _PEXELS.format(372281),
    },
]
