"""
Integration test: build a team through the editing layer and report on it.
"""

from decimal import Decimal

from orgrewards import (
    OrgTree,
    add_child,
    build_report,
    compute_metrics,
    create_project,
    delete_node,
    format_reward_report,
    update_node,
)


def _build_team() -> tuple[OrgTree, dict[str, str]]:
    tree = create_project("Seoul", root_name="Alice", root_recommender="")
    ids = {"alice": tree.root_node_id}

    for leg in ("Bob", "Cara"):
        tree, ids[leg] = add_child(tree, ids["alice"], name=leg, recommender="alice")
        for idx in (1, 2):
            name = f"{leg}-{idx}"
            tree, ids[name] = add_child(tree, ids[leg], name=name, recommender=leg)
            tree, ids[f"{name}-leaf"] = add_child(
                tree, ids[name], name=f"{name}-leaf", recommender=name, value=7500
            )
    return tree, ids


class TestReportFlow:
    """End-to-end recomputation after edits."""

    def test_full_report(self) -> None:
        tree, ids = _build_team()

        metrics = compute_metrics(tree)
        report = build_report(tree, "0.007")
        entries = report.by_node_id()

        assert metrics[ids["alice"]].rank == "S2"
        assert metrics[ids["Bob"]].rank == "S2"
        assert metrics[ids["Bob-1"]].rank == "S1"

        # Leaves mine 52.5 each; their recommenders collect 5.25
        assert entries[ids["Bob-1-leaf"]].mining == Decimal("52.5")
        assert entries[ids["Bob-1"]].referral == Decimal("5.25")
        # Alice: 30,000 below her at S2 -> 30000 * 0.007 * 0.1 * 2
        assert entries[ids["alice"]].community == Decimal("42")
        # Bob: 15,000 below at S2 -> 21
        assert entries[ids["Bob"]].community == Decimal("21")

        assert report.entries[0].node_id == ids["alice"]
        assert [e.level for e in report.entries] == sorted(e.level for e in report.entries)

        # 4 leaves * 52.5 mining, 4 * 5.25 referral, community 42 + 2*21 + 4*5.25
        assert report.grand_total == Decimal("210") + Decimal("21") + Decimal("105")

        text = format_reward_report(report)
        assert text.splitlines()[-1] == "Total rewards: $ 336.00"

    def test_report_after_edits(self) -> None:
        tree, ids = _build_team()

        pruned = delete_node(tree, ids["Cara-2"])
        funded = update_node(pruned, ids["Bob"], value=1000)

        metrics = compute_metrics(funded)
        before = build_report(funded, "0.009").by_node_id()

        assert ids["Cara-2-leaf"] not in metrics
        assert metrics[ids["Cara"]].rank == "S1"
        # Bob's branch reaches S2, Cara's S1: still two branches at S1 or above
        assert metrics[ids["alice"]].children_total_value == Decimal("23500")
        assert metrics[ids["alice"]].rank == "S2"
        assert before[ids["alice"]].referral == Decimal("0.9")

        renamed = update_node(funded, ids["alice"], name="Alicia")
        after = build_report(renamed, "0.009").by_node_id()

        assert after[ids["alice"]].referral == Decimal("0")
        assert after[ids["alice"]].community == before[ids["alice"]].community
