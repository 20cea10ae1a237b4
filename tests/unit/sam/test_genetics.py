"""
Unit tests for genotype-driven insights.
"""

import pytest

from app.models.genetics import GeneticProfile
from app.sam.genetics import (
    genotype_map,
    get_genetic_insights,
    get_nutrigenomics_recommendations,
    get_pharmacogenomics_insights,
    get_recovery_gene_panel,
)


def _make_genetics(**genotypes: str) -> list[GeneticProfile]:
    return [GeneticProfile(athlete_id=1, gene=g, genotype=v) for g, v in genotypes.items()]


class TestGenotypeMap:

    def test_last_entry_wins(self):
        profiles = _make_genetics(ACTN3="RR") + _make_genetics(ACTN3="XX")
        assert genotype_map(profiles) == {"ACTN3": "XX"}


class TestGeneticInsights:

    def test_all_traits(self):
        insights = get_genetic_insights(_make_genetics(PER3="long", CLOCK="AA", ACTN3="RR"))
        assert [i.gene for i in insights] == [
            "PER3 (Long variant)", "CLOCK (AA genotype)", "ACTN3 (RR genotype)",
        ]
        assert insights[2].trait == "Enhanced power/sprint capacity"

    @pytest.mark.parametrize("genotypes, expected", [
        ({"PER3": "short"}, ["PER3 (Short variant)"]),
        ({"ACTN3": "XX"}, ["ACTN3 (XX genotype)"]),
        ({"ACTN3": "RX", "CLOCK": "TT"}, []),
    ])
    def test_variants(self, genotypes, expected):
        assert [i.gene for i in get_genetic_insights(_make_genetics(**genotypes))] == expected


class TestPharmacogenomics:

    @pytest.mark.parametrize("genotypes, medication, risk", [
        ({"CYP2D6": "Poor Metabolizer"}, "Codeine", "high"),
        ({"CYP2D6": "Ultra Metabolizer"}, "Codeine", "high"),
        ({"CYP2C19": "Poor Metabolizer"}, "Omeprazole", "medium"),
        ({"SLCO1B1": "CC"}, "Atorvastatin", "medium"),
        ({"SLCO1B1": "CT"}, "Atorvastatin", "high"),
    ])
    def test_single_gene(self, genotypes, medication, risk):
        insights = get_pharmacogenomics_insights(_make_genetics(**genotypes))
        assert len(insights) == 1
        assert insights[0].medication == medication
        assert insights[0].risk_level == risk

    def test_normal_metabolizers(self):
        profiles = _make_genetics(CYP2D6="Extensive Metabolizer", CYP2C19="Ultra Metabolizer", SLCO1B1="TC")
        assert get_pharmacogenomics_insights(profiles) == []

    def test_ultra_effect(self):
        insights = get_pharmacogenomics_insights(_make_genetics(CYP2D6="Ultra Metabolizer"))
        assert insights[0].effect == "Ultra-rapid metabolism - risk of toxicity"


class TestNutrigenomics:

    def test_full_profile_order(self):
        profiles = _make_genetics(
            MTHFR="TT", VDR="Ff", FTO="AT", ACTN3="XX",
            PPARGC1A="Ser482Ser", ADRB2="Gly16Gly", NOS3="CT",
        )
        recs = get_nutrigenomics_recommendations(profiles)
        assert [r.supplement for r in recs] == [
            "Methylated Folate (5-MTHF)",
            "Vitamin D3",
            "Green Tea Extract (EGCG)",
            "Creatine Monohydrate",
            "Resveratrol",
            "Coenzyme Q10",
            "Caffeine (Genotype-Optimized)",
            "L-Citrulline",
        ]
        assert recs[0].priority == "high"
        assert recs[1].priority == "high"
        assert recs[2].priority == "medium"

    def test_mthfr_heterozygous_is_medium(self):
        recs = get_nutrigenomics_recommendations(_make_genetics(MTHFR="CT"))
        assert recs[0].priority == "medium"

    def test_actn3_rr(self):
        recs = get_nutrigenomics_recommendations(_make_genetics(ACTN3="RR"))
        assert recs[0].supplement == "Beta-Alanine"
        assert recs[0].timing == "Pre-workout"

    def test_no_matches(self):
        profiles = _make_genetics(MTHFR="CC", VDR="ff", FTO="TT", ACTN3="RX", NOS3="GG")
        assert get_nutrigenomics_recommendations(profiles) == []


class TestRecoveryPanel:

    def test_panel_order_and_cases(self):
        profiles = _make_genetics(COMT="GG", IL6="GG", TNF="AG", IL10="CC")
        panel = get_recovery_gene_panel(profiles)
        assert [m.gene for m in panel] == ["IL6", "TNF", "IL10", "COMT"]

        il6, tnf, il10, comt = panel
        assert il6.impact == "Higher baseline inflammation, slower recovery"
        assert il6.priority == "high"
        assert tnf.impact == "Moderate TNF-alpha production"
        assert tnf.priority == "medium"
        assert il10.impact == "Lower IL-10 production, reduced anti-inflammatory capacity"
        assert il10.priority == "high"
        assert comt.protocol == "May recover quickly but monitor for under-recovery from overtraining"

    def test_il10_default_priority_is_low(self):
        panel = get_recovery_gene_panel(_make_genetics(IL10="AA"))
        assert panel[0].priority == "low"

    def test_missing_genes_are_skipped(self):
        assert get_recovery_gene_panel(_make_genetics(ACTN3="RR")) == []
