"""Tests for dataset loaders."""

import json
import pytest

from lordsboard.dashboard.utils.data_loader import (
    load_json,
    load_social_export,
    load_achievement_entries,
    load_qualifying_addresses,
    load_known_addresses,
    load_marketplace_sales,
    parse_social_export,
)
from lordsboard.dashboard.reward_engine.services import compute_proportional_rewards


def _write(path, data):
    path.write_text(json.dumps(data))
    return path


class TestLoadJson:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Failed to parse JSON"):
            load_json(path)


class TestLoadSocialExport:
    """Roster parsing."""

    def test_loads_tribes_and_game_info(self, tmp_path, social_export_data):
        export = load_social_export(_write(tmp_path / "export.json", social_export_data))

        assert export.timestamp == "2025-06-01T00:00:00Z"
        assert export.total_players == 3
        assert export.total_tribes == 2
        assert [t.name for t in export.tribes] == ["Iron Legion", "Ashen Court"]
        assert export.total_prize_lords == 144000

    def test_missing_tribes_fails(self):
        with pytest.raises(ValueError, match="missing 'tribes'"):
            parse_social_export({"gameInfo": {}})

    def test_malformed_member_is_skipped(self, social_export_data):
        social_export_data["tribes"][0]["members"].append({"name": "no address", "points": 5})
        social_export_data["tribes"][0]["members"].append({"address": "0xbad", "points": -5})

        export = parse_social_export(social_export_data)

        assert len(export.tribes[0].members) == 2

    def test_malformed_tribe_is_skipped(self, social_export_data):
        social_export_data["tribes"].append({"name": "no rank", "members": []})

        export = parse_social_export(social_export_data)

        assert len(export.tribes) == 2

    def test_game_info_defaults_to_counts(self, social_export_data):
        del social_export_data["gameInfo"]

        export = parse_social_export(social_export_data)

        assert export.total_players == 3
        assert export.total_tribes == 2


class TestOtherLoaders:
    def test_achievement_entries(self, tmp_path):
        path = _write(tmp_path / "points.json", [
            {"address": "0x1", "earnings": 10, "completeds": ["A"]},
            {"player_id": "0x2", "total_points": 20},
            {"address": "0x3"},
        ])

        entries = load_achievement_entries(path)

        assert [e.address for e in entries] == ["0x1", "0x2"]

    def test_non_finite_achievement_entries_are_skipped(self, tmp_path):
        """json accepts Infinity and NaN literals; those records must not reach the split"""
        path = tmp_path / "points.json"
        path.write_text(
            '[{"address": "0xa", "earnings": 100}, {"address": "0xb", "earnings": 300},'
            ' {"address": "0xc", "earnings": Infinity}, {"address": "0xd", "earnings": NaN}]'
        )

        entries = load_achievement_entries(path)
        records = compute_proportional_rewards(entries, 400)

        assert [e.address for e in entries] == ["0xa", "0xb"]
        assert [r.lords_reward for r in records] == pytest.approx([100, 300])

    def test_achievement_entries_must_be_list(self, tmp_path):
        with pytest.raises(ValueError, match="must be a list"):
            load_achievement_entries(_write(tmp_path / "points.json", {"address": "0x1"}))

    def test_qualifying_addresses(self, tmp_path):
        path = _write(tmp_path / "q.json", [{"address": "0x1"}, "0x2", {"other": 1}])

        assert load_qualifying_addresses(path) == ["0x1", "0x2"]

    def test_known_addresses(self, tmp_path):
        registry = load_known_addresses(_write(tmp_path / "known.json", {"0x01": "Loaf"}))

        assert registry.get("0x1") == "Loaf"

    def test_marketplace_sales(self, tmp_path):
        path = _write(tmp_path / "sales.json", [{"hex_price": "0x1"}, {"price": 3}])

        assert load_marketplace_sales(path) == ["0x1"]
