"""Essential tests for RewardsOrchestrator."""

import pytest
from unittest.mock import Mock

from lordsboard.dashboard.reward_engine import RewardsOrchestrator, RewardsReport
from lordsboard.dashboard.reward_engine.models import RewardConfig, SocialExport


@pytest.fixture
def config():
    return RewardConfig(cartridge_lords_pool=400, daydreams_strk_pool=25000,
                        daydreams_achievement_id="DAYDREAMS_AGENT")


@pytest.fixture
def orchestrator(config):
    return RewardsOrchestrator(config=config)


class TestBuildReport:
    """Full report over all pipelines."""

    def test_runs_all_pipelines(self, orchestrator, scenario_tribe, achievement_entries):
        export = SocialExport(tribes=[scenario_tribe])

        report = orchestrator.build_report(export, achievement_entries)

        assert isinstance(report, RewardsReport)
        assert len(report.victory) == 2
        assert [r.lords_reward for r in report.cartridge] == pytest.approx([100, 300])
        # Only 0xa completed the daydreams achievement
        assert [(r.address, r.reward) for r in report.daydreams] == [("0xa", 25000)]
        assert report.total_prize_lords == 90000
        assert report.total_prize_strk == 15000

    def test_explicit_qualifiers_override_achievements(self, orchestrator, achievement_entries):
        report = orchestrator.build_report(
            entries=achievement_entries,
            qualifying_addresses=["0x1", "0x2", "0x3", "0x4"],
        )

        assert [r.reward for r in report.daydreams] == [6250] * 4

    def test_missing_inputs_give_empty_sections(self, orchestrator):
        report = orchestrator.build_report()

        assert report.victory == []
        assert report.cartridge == []
        assert report.daydreams == []

    def test_to_dict_totals(self, orchestrator, scenario_tribe, achievement_entries):
        report = orchestrator.build_report(SocialExport(tribes=[scenario_tribe]), achievement_entries)

        totals = report.to_dict()["totals"]

        assert totals["victoryLords"] == pytest.approx(90000)
        assert totals["cartridgeLords"] == pytest.approx(400)
        assert totals["daydreamsStrk"] == pytest.approx(25000)


class TestPipelineIsolation:
    """One failing pipeline must not block the others."""

    def test_victory_failure_is_contained(self, config, scenario_tribe, achievement_entries):
        member_rewards = Mock()
        member_rewards.compute_member_rewards.side_effect = RuntimeError("boom")
        orchestrator = RewardsOrchestrator(config=config, member_rewards=member_rewards)

        report = orchestrator.build_report(SocialExport(tribes=[scenario_tribe]), achievement_entries)

        assert report.victory == []
        assert len(report.cartridge) == 2
        assert len(report.daydreams) == 1

    def test_splitter_failure_is_contained(self, config, scenario_tribe, achievement_entries):
        splitter = Mock()
        splitter.compute_proportional_rewards.side_effect = RuntimeError("boom")
        splitter.compute_equal_split_rewards.side_effect = RuntimeError("boom")
        orchestrator = RewardsOrchestrator(config=config, pool_splitter=splitter)

        report = orchestrator.build_report(SocialExport(tribes=[scenario_tribe]), achievement_entries)

        assert len(report.victory) == 2
        assert report.cartridge == []
        assert report.daydreams == []


class TestAllocatePrizes:
    """Rank prizes follow the orchestrator's config."""

    def test_uses_config_rank_table(self, scenario_tribe):
        config = RewardConfig(rank_prize_percentages={1: 50.0})
        orchestrator = RewardsOrchestrator(config=config)
        export = SocialExport(tribes=[scenario_tribe])

        orchestrator.allocate_prizes(export, total_lords=100000, total_strk=10000)

        assert scenario_tribe.prize.lords == pytest.approx(50000)
        assert scenario_tribe.prize.strk == pytest.approx(5000)
        records = {r.address: r for r in orchestrator.victory_rewards(export)}
        assert records["0xb0b"].owner_bonus_lords == pytest.approx(15000)
