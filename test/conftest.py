import pytest
import ujson

from token_offchain_metadata.fetchers.base import JsonResponse

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
DAI_BASE = "0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb"
DAI_LOGO = "https://assets.example/dai.png"


@pytest.fixture
def token_list_document():
    """A one-token list bridging DAI to Base."""
    return {
        "name": "Example List",
        "timestamp": "2024-12-12T18:01:30.180Z",
        "version": {"major": 12, "minor": 1, "patch": 0},
        "tokens": [
            {
                "chainId": 1,
                "address": DAI,
                "name": "Dai Stablecoin",
                "symbol": "DAI",
                "decimals": 18,
                "logoURI": DAI_LOGO,
                "extensions": {"bridgeInfo": {"8453": {"tokenAddress": DAI_BASE}}},
            }
        ],
    }


class RecordingFetch:
    """Fetch capability serving canned documents by URL and recording requests."""

    def __init__(self, documents):
        self.documents = documents
        self.requested = []

    async def __call__(self, url):
        self.requested.append(url)
        if url not in self.documents:
            return JsonResponse(url=url, status=404, status_text="Not Found")
        return JsonResponse(url=url, status=200, status_text="OK", body=ujson.dumps(self.documents[url]))


@pytest.fixture
def recording_fetch():
    return RecordingFetch
