"""Integration tests for FrogCrypto API endpoints."""

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from frogcrypto_core.feed_cache import FeedCache

PUBLIC_FEED_ID = "0f2a9c1e-1111-4c3b-9f10-7f3c7c0b0001"
PRIVATE_FEED_ID = "0f2a9c1e-2222-4c3b-9f10-7f3c7c0b0002"
EXPIRED_FEED_ID = "0f2a9c1e-3333-4c3b-9f10-7f3c7c0b0003"
EMPTY_FEED_ID = "0f2a9c1e-4444-4c3b-9f10-7f3c7c0b0004"


@pytest_asyncio.fixture
async def seeded(db_session: AsyncSession, feed_cache: FeedCache, make_feed, make_frog):
    """Two frogs and a handful of feeds, loaded into the cache."""
    db_session.add_all(
        [
            make_frog(1),
            make_frog(2, rarity="rare"),
            make_frog(3, biome="Desert", rarity="object"),
            make_feed(PUBLIC_FEED_ID, name="Jungle"),
            make_feed(PRIVATE_FEED_ID, name="Secret", private=True),
            make_feed(EXPIRED_FEED_ID, name="Expired", active_until=1),
            make_feed(EMPTY_FEED_ID, name="Empty", biomes={"Swamp": {"drop_weight_scaler": 1}}),
        ]
    )
    await db_session.flush()
    assert await feed_cache.refresh()


class TestListFeeds:
    """Test feed listing and lookup."""

    @pytest.mark.asyncio
    async def test_list_empty(self, client: AsyncClient):
        response = await client.get("/frogcrypto/feeds")

        assert response.status_code == 200
        assert response.json() == {"feeds": []}

    @pytest.mark.asyncio
    async def test_list_hides_private_feeds(self, client: AsyncClient, seeded):
        response = await client.get("/frogcrypto/feeds")

        assert response.status_code == 200
        ids = {feed["id"] for feed in response.json()["feeds"]}
        assert PUBLIC_FEED_ID in ids
        assert PRIVATE_FEED_ID not in ids

    @pytest.mark.asyncio
    async def test_get_private_feed_by_id(self, client: AsyncClient, seeded):
        response = await client.get(f"/frogcrypto/feeds/{PRIVATE_FEED_ID}")

        assert response.status_code == 200
        feeds = response.json()["feeds"]
        assert len(feeds) == 1
        assert feeds[0]["name"] == "Secret"
        assert feeds[0]["biomes"] == {"Jungle": {"drop_weight_scaler": 1.0}}

    @pytest.mark.asyncio
    async def test_get_unknown_feed(self, client: AsyncClient, seeded):
        response = await client.get("/frogcrypto/feeds/does-not-exist")

        assert response.status_code == 404


class TestPollFeed:
    """Test polling feeds for frogs."""

    @pytest.mark.asyncio
    async def test_poll_grants_frog(
        self, client: AsyncClient, seeded, user_credential, user_semaphore_id
    ):
        response = await client.post(
            f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={"pcd": user_credential}
        )

        assert response.status_code == 200
        actions = response.json()["actions"]
        assert len(actions) == 1
        assert actions[0]["type"] == "AppendToFolder"
        assert actions[0]["folder"] == "FrogCrypto"

        issued = actions[0]["pcds"][0]
        assert issued["owner"] == user_semaphore_id
        reward = issued["pcd"]
        assert reward["frog_id"] in (1, 2)
        assert reward["biome"] == "Jungle"
        assert reward["owner_semaphore_id"] == user_semaphore_id
        assert 0 <= reward["jump"] <= 5
        assert reward["temperament"] in ("CALM", "COOL")

    @pytest.mark.asyncio
    async def test_second_poll_hits_cooldown(
        self, client: AsyncClient, seeded, user_credential, user_semaphore_id
    ):
        first = await client.post(f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={"pcd": user_credential})
        assert first.status_code == 200

        second = await client.post(f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={"pcd": user_credential})

        assert second.status_code == 403
        body = second.json()
        assert "next_fetch_at" in body
        assert "detail" in body

        scoreboard = await client.get("/frogcrypto/scoreboard")
        assert scoreboard.json() == [{"semaphore_id": user_semaphore_id, "score": 1, "rank": 1}]

    @pytest.mark.asyncio
    async def test_poll_without_credential(self, client: AsyncClient, seeded):
        response = await client.post(f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_poll_with_bad_credential(self, client: AsyncClient, seeded):
        response = await client.post(f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={"pcd": "nope"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_poll_unknown_feed(self, client: AsyncClient, seeded, user_credential):
        response = await client.post("/frogcrypto/feeds/does-not-exist", json={"pcd": user_credential})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_poll_expired_feed(self, client: AsyncClient, seeded, user_credential):
        response = await client.post(f"/frogcrypto/feeds/{EXPIRED_FEED_ID}", json={"pcd": user_credential})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_poll_feed_without_frogs(self, client: AsyncClient, seeded, user_credential):
        response = await client.post(f"/frogcrypto/feeds/{EMPTY_FEED_ID}", json={"pcd": user_credential})

        assert response.status_code == 404

        # Failed grant leaves the cooldown untouched
        state = await client.post(
            "/frogcrypto/user-state", json={"pcd": user_credential, "feed_ids": [EMPTY_FEED_ID]}
        )
        assert state.json()["feeds"][0]["last_fetched_at"] == 0


class TestUserState:
    """Test user state and scoreboard."""

    @pytest.mark.asyncio
    async def test_new_user_state(self, client: AsyncClient, seeded, user_credential):
        response = await client.post("/frogcrypto/user-state", json={"pcd": user_credential})

        assert response.status_code == 200
        data = response.json()
        assert data["feeds"] == []
        assert data["possible_frog_ids"] == [1, 2]
        assert data["my_score"] is None

    @pytest.mark.asyncio
    async def test_user_state_after_grant(
        self, client: AsyncClient, seeded, user_credential, user_semaphore_id
    ):
        await client.post(f"/frogcrypto/feeds/{PUBLIC_FEED_ID}", json={"pcd": user_credential})

        response = await client.post("/frogcrypto/user-state", json={"pcd": user_credential})

        data = response.json()
        assert len(data["feeds"]) == 1
        feed_state = data["feeds"][0]
        assert feed_state["feed_id"] == PUBLIC_FEED_ID
        assert feed_state["active"] is True
        assert feed_state["next_fetch_at"] - feed_state["last_fetched_at"] == 60_000
        assert data["my_score"] == {"semaphore_id": user_semaphore_id, "score": 1, "rank": 1}

    @pytest.mark.asyncio
    async def test_user_state_requires_credential(self, client: AsyncClient, seeded):
        response = await client.post("/frogcrypto/user-state", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_scoreboard(self, client: AsyncClient):
        response = await client.get("/frogcrypto/scoreboard")

        assert response.status_code == 200
        assert response.json() == []


class TestAdmin:
    """Test admin endpoints."""

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, client: AsyncClient, user_credential):
        response = await client.post(
            "/frogcrypto/admin/delete-frogs", json={"pcd": user_credential, "frog_ids": [1]}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_upsert_and_delete_frogs(self, client: AsyncClient, admin_credential):
        frog = {
            "id": 10,
            "uuid": "00000000-0000-0000-0000-000000000010",
            "name": "Admin Frog",
            "biome": "Swamp",
            "rarity": "epic",
            "temperament_weights": {"SUS": 1},
            "drop_weight": 2,
            "jump_min": 1,
            "jump_max": 2,
            "speed_min": 1,
            "speed_max": 2,
            "intelligence_min": 1,
            "intelligence_max": 2,
            "beauty_min": 1,
            "beauty_max": 2,
        }

        response = await client.post(
            "/frogcrypto/admin/frogs", json={"pcd": admin_credential, "frogs": [frog]}
        )
        assert response.status_code == 200
        frogs = response.json()["frogs"]
        assert [f["id"] for f in frogs] == [10]
        assert frogs[0]["temperament_weights"] == {"SUS": 1.0}

        response = await client.post(
            "/frogcrypto/admin/delete-frogs", json={"pcd": admin_credential, "frog_ids": [10]}
        )
        assert response.status_code == 200
        assert response.json()["frogs"] == []

    @pytest.mark.asyncio
    async def test_invalid_frog_rejected(self, client: AsyncClient, admin_credential):
        frog = {
            "id": 11,
            "uuid": "00000000-0000-0000-0000-000000000011",
            "name": "Broken",
            "biome": "Jungle",
            "rarity": "common",
            "drop_weight": 1,
            "jump_min": 9,
            "jump_max": 2,
            "speed_min": 1,
            "speed_max": 2,
            "intelligence_min": 1,
            "intelligence_max": 2,
            "beauty_min": 1,
            "beauty_max": 2,
        }

        response = await client.post(
            "/frogcrypto/admin/frogs", json={"pcd": admin_credential, "frogs": [frog]}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_upsert_feeds_refreshes_cache(
        self, client: AsyncClient, feed_cache: FeedCache, admin_credential
    ):
        feed = {
            "id": PUBLIC_FEED_ID,
            "name": "New Feed",
            "private": False,
            "active_until": 4_102_444_800,
            "cooldown": 30,
            "biomes": {"Celestial": {"drop_weight_scaler": 0.5}},
        }

        response = await client.post(
            "/frogcrypto/admin/feeds", json={"pcd": admin_credential, "feeds": [feed]}
        )

        assert response.status_code == 200
        assert [f["id"] for f in response.json()["feeds"]] == [PUBLIC_FEED_ID]
        assert feed_cache.has_feed(PUBLIC_FEED_ID)

        listing = await client.get("/frogcrypto/feeds")
        assert listing.json()["feeds"][0]["cooldown"] == 30
