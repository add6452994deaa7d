import logging

import pytest
from payloads import BASE, PIKACHU_SPECIES, detail_payload, listing_result

from dex_browser_core.browser import CatalogBrowser
from dex_browser_core.config import BrowserConfig
from dex_browser_core.utils.core.config_registry import set_config
from dex_browser_core.utils.core.document import Document

PAGE_ONE = [listing_result(1, "bulbasaur"), listing_result(2, "ivysaur"), listing_result(3, "venusaur")]


@pytest.fixture
def browser(fake_api, config) -> CatalogBrowser:
    return CatalogBrowser(config, fake_api.client(config))


def card_ids(browser: CatalogBrowser) -> list[str]:
    return [card["data-id"] for card in browser.document.grid.select(".pokemon-card")]


class TestPaging:
    @pytest.mark.asyncio
    async def test_load_page_renders_and_hydrates(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon", {"results": PAGE_ONE})
        fake_api.add_json("/api/v2/pokemon/1/", detail_payload(1, "bulbasaur", ["grass", "poison"]))
        fake_api.add_json("/api/v2/pokemon/2/", detail_payload(2, "ivysaur", ["grass", "poison"]))
        fake_api.add_json("/api/v2/pokemon/3/", detail_payload(3, "venusaur", ["grass", "poison"]))

        entries = await browser.load_page()

        assert [e.name for e in entries] == ["bulbasaur", "ivysaur", "venusaur"]
        assert card_ids(browser) == ["1", "2", "3"]
        badges = browser.document.get_element_by_id("types-3").find_all("span")
        assert [b.get_text() for b in badges] == ["grass", "poison"]

    @pytest.mark.asyncio
    async def test_listing_is_requested_before_details(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon", {"results": PAGE_ONE})

        await browser.load_page()

        assert fake_api.requested_paths()[0] == "/api/v2/pokemon"
        assert len(fake_api.requests) == 4

    @pytest.mark.asyncio
    async def test_next_and_previous_page_move_by_page_size(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon", {"results": []})

        await browser.next_page()
        assert browser.offset == 3
        await browser.next_page()
        assert browser.offset == 6
        await browser.previous_page()
        assert browser.offset == 3

        offsets = [r.url.params["offset"] for r in fake_api.requests]
        assert offsets == ["3", "6", "3"]

    @pytest.mark.asyncio
    async def test_previous_page_stops_at_zero(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon", {"results": []})

        await browser.previous_page()

        assert browser.offset == 0
        assert fake_api.requests[0].url.params["offset"] == "0"

    @pytest.mark.asyncio
    async def test_failed_listing_renders_empty_grid(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon", {"results": PAGE_ONE})
        await browser.load_page()
        fake_api.fail("/api/v2/pokemon")

        entries = await browser.load_page(3)

        assert entries == []
        assert card_ids(browser) == []

    @pytest.mark.asyncio
    async def test_missing_grid_skips_render(self, fake_api, config, caplog):
        fake_api.add_json("/api/v2/pokemon", {"results": PAGE_ONE})
        browser = CatalogBrowser(config, fake_api.client(config), Document("<html><body></body></html>"))

        with caplog.at_level(logging.WARNING):
            entries = await browser.load_page()

        assert len(entries) == 3
        assert fake_api.requested_paths() == ["/api/v2/pokemon"]
        assert any("no grid container" in r.getMessage() for r in caplog.records)


class TestTypeFilter:
    @pytest.mark.asyncio
    async def test_load_type_filter_renders_options(self, browser, fake_api):
        fake_api.add_json(
            "/api/v2/type",
            {"results": [{"name": "normal", "url": f"{BASE}/type/1/"}, {"name": "fire", "url": f"{BASE}/type/10/"}]},
        )

        types = await browser.load_type_filter()

        assert [t.name for t in types] == ["normal", "fire"]
        options = browser.document.type_filter.find_all("option")
        assert [o["value"] for o in options] == ["", "normal", "fire"]

    @pytest.mark.asyncio
    async def test_failed_type_fetch_leaves_only_all_option(self, browser, fake_api):
        fake_api.fail("/api/v2/type")

        assert await browser.load_type_filter() == []
        options = browser.document.type_filter.find_all("option")
        assert [o["value"] for o in options] == [""]


class TestDetail:
    @pytest.mark.asyncio
    async def test_open_detail_fetches_pokemon_and_species(self, browser, fake_api, pikachu_payload):
        fake_api.add_json("/api/v2/pokemon/25/", pikachu_payload)
        fake_api.add_json("/api/v2/pokemon-species/25/", PIKACHU_SPECIES)

        markup = await browser.open_detail(25)

        assert markup is not None
        assert browser.current_detail.name == "pikachu"
        assert sorted(fake_api.requested_paths()) == [
            "/api/v2/pokemon-species/25/",
            "/api/v2/pokemon/25/",
        ]
        assert browser.document.modal_root.select_one(".genus").get_text() == "Mouse Pokémon"

    @pytest.mark.asyncio
    async def test_open_detail_accepts_card_url(self, browser, fake_api, pikachu_payload):
        fake_api.add_json("/api/v2/pokemon/25/", pikachu_payload)
        fake_api.add_json("/api/v2/pokemon-species/25/", PIKACHU_SPECIES)

        await browser.open_detail(f"{BASE}/pokemon/25/")

        assert browser.current_detail.id == 25

    @pytest.mark.asyncio
    async def test_species_failure_still_opens_overlay(self, browser, fake_api, pikachu_payload):
        fake_api.add_json("/api/v2/pokemon/25/", pikachu_payload)

        await browser.open_detail(25)

        flavor = browser.document.modal_root.select_one(".flavor-text").get_text()
        assert flavor == "No description available."

    @pytest.mark.asyncio
    async def test_alternate_form_uses_linked_species(self, browser, fake_api):
        mega = detail_payload(
            10034,
            "charizard-mega-x",
            ["fire", "dragon"],
            species={"name": "charizard", "url": f"{BASE}/pokemon-species/6/"},
        )
        fake_api.add_json("/api/v2/pokemon/10034/", mega)
        fake_api.add_json(
            "/api/v2/pokemon-species/6/",
            {
                "flavor_text_entries": [{"flavor_text": "Spits fire.", "language": {"name": "en"}}],
                "genera": [{"genus": "Flame Pokémon", "language": {"name": "en"}}],
            },
        )

        await browser.open_detail(10034)

        paths = fake_api.requested_paths()
        assert "/api/v2/pokemon-species/10034/" in paths
        assert paths[-1] == "/api/v2/pokemon-species/6/"
        modal = browser.document.modal_root
        assert modal.select_one(".genus").get_text() == "Flame Pokémon"
        assert modal.select_one(".flavor-text").get_text() == "Spits fire."

    @pytest.mark.asyncio
    async def test_species_link_is_not_refetched_when_it_matches(self, browser, fake_api, pikachu_payload):
        fake_api.add_json("/api/v2/pokemon/25/", pikachu_payload)

        await browser.open_detail(25)

        assert fake_api.requested_paths().count("/api/v2/pokemon-species/25/") == 1

    @pytest.mark.asyncio
    async def test_pokemon_failure_opens_nothing(self, browser, fake_api):
        fake_api.add_json("/api/v2/pokemon-species/25/", PIKACHU_SPECIES)

        assert await browser.open_detail(25) is None
        assert browser.current_detail is None
        assert browser.document.modal_root.contents == []

    @pytest.mark.asyncio
    async def test_close_detail_clears_overlay(self, browser, fake_api, pikachu_payload):
        fake_api.add_json("/api/v2/pokemon/25/", pikachu_payload)
        await browser.open_detail(25)

        browser.close_detail()

        assert browser.current_detail is None
        assert browser.document.get_element_by_id("modal-backdrop") is None
        assert browser.document.modal_root is not None


def test_browser_uses_registered_config(fake_api):
    set_config(BrowserConfig(page_size=7))

    browser = CatalogBrowser(client=fake_api.client())

    assert browser.page_size == 7


def test_species_url_from_detail_url(browser):
    assert browser.species_url(f"{BASE}/pokemon/25/") == f"{BASE}/pokemon-species/25/"
    assert browser.species_url(25) == f"{BASE}/pokemon-species/25/"
