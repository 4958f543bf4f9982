from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def bmkg_payload() -> dict[str, Any]:
    """trimmed bmkg response: two day blocks, string and numeric readings"""
    return {
        "location": {
            "adm4": "31.71.03.1001",
            "provinsi": "DKI Jakarta",
            "kotkab": "Kota Adm. Jakarta Pusat",
            "kecamatan": "Kemayoran",
            "desa": "Gunung Sahari Selatan",
            "lon": 106.8451,
            "lat": -6.1644,
            "timezone": "Asia/Jakarta",
        },
        "data": [
            {
                "weather": [
                    [
                        {
                            "local_datetime": "2024-01-01 03:00:00",
                            "analysis_date": "2023-12-31T12:00:00",
                            "t": 30,
                            "hu": 75,
                            "ws": 7.2,
                            "weather_desc": "Berawan",
                            "image": "https://api-apps.bmkg.go.id/storage/icon/cuaca/berawan-am.svg",
                        },
                        {
                            "local_datetime": "2024-01-01 00:00:00",
                            "analysis_date": "2023-12-31T12:00:00",
                            "t": "28",
                            "hu": "80",
                            "ws": "5",
                            "weather_desc": "Cerah",
                        },
                    ],
                    [
                        {
                            "local_datetime": "2024-01-02 00:00:00",
                            "analysis_date": "2024-01-01T00:00:00Z",
                            "t": "27",
                            "hu": "85",
                            "ws": "3.6",
                            "weather_desc": "Hujan Ringan",
                            "image": "https://api-apps.bmkg.go.id/storage/icon/cuaca/hujan%20ringan-am.svg",
                        },
                    ],
                ]
            }
        ],
    }
