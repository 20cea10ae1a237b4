"""
Genotype-driven insights: chronotype/performance traits,
pharmacogenomics, nutrigenomics and the recovery gene panel.

All functions take an athlete's profile rows and look genotypes up by
gene symbol.  When the same gene appears more than once the last row
wins.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from app.models.genetics import GeneticProfile
from app.schemas.genetics import (
    GeneticInsight,
    NutrigenomicRecommendation,
    PharmacogenomicInsight,
    RecoveryGeneMarker,
)


def genotype_map(profiles: Sequence[GeneticProfile]) -> dict[str, str]:
    """Gene symbol -> genotype."""
    genes: dict[str, str] = {}
    for profile in profiles:
        genes[profile.gene] = profile.genotype
    return genes


# ======================================================================
# Trait insights
# ======================================================================


def get_genetic_insights(profiles: Sequence[GeneticProfile]) -> list[GeneticInsight]:
    genes = genotype_map(profiles)
    insights: list[GeneticInsight] = []

    per3 = genes.get("PER3")
    if per3 == "long":
        insights.append(GeneticInsight(
            gene="PER3 (Long variant)",
            trait="Natural night owl tendency",
            recommendation=(
                "Allow later bedtimes when possible, prioritize consistent wake times, "
                "use bright light therapy in morning"
            ),
        ))
    elif per3 == "short":
        insights.append(GeneticInsight(
            gene="PER3 (Short variant)",
            trait="Natural early bird tendency",
            recommendation=(
                "Optimize early morning training, avoid late evening intense exercise, "
                "maintain regular early bedtime"
            ),
        ))

    if genes.get("CLOCK") == "AA":
        insights.append(GeneticInsight(
            gene="CLOCK (AA genotype)",
            trait="Enhanced circadian sensitivity",
            recommendation=(
                "Maintain strict sleep schedule, minimize blue light exposure 2h before bed, "
                "prioritize sleep environment optimization"
            ),
        ))

    actn3 = genes.get("ACTN3")
    if actn3 == "XX":
        insights.append(GeneticInsight(
            gene="ACTN3 (XX genotype)",
            trait="Enhanced endurance capacity",
            recommendation=(
                "Focus on aerobic base building, longer recovery periods between "
                "high-intensity sessions, emphasize mitochondrial health"
            ),
        ))
    elif actn3 == "RR":
        insights.append(GeneticInsight(
            gene="ACTN3 (RR genotype)",
            trait="Enhanced power/sprint capacity",
            recommendation=(
                "Optimize explosive training, shorter but more intense sessions, "
                "focus on neuromuscular recovery"
            ),
        ))

    return insights


# ======================================================================
# Pharmacogenomics
# ======================================================================


def get_pharmacogenomics_insights(
    profiles: Sequence[GeneticProfile],
) -> list[PharmacogenomicInsight]:
    genes = genotype_map(profiles)
    insights: list[PharmacogenomicInsight] = []

    cyp2d6 = genes.get("CYP2D6")
    if cyp2d6 is not None:
        if "Poor" in cyp2d6:
            insights.append(PharmacogenomicInsight(
                medication="Codeine", gene="CYP2D6", genotype=cyp2d6,
                effect="Poor metabolism - may be ineffective",
                recommendation="Avoid codeine, consider alternative pain relief",
                risk_level="high",
            ))
        elif "Ultra" in cyp2d6:
            insights.append(PharmacogenomicInsight(
                medication="Codeine", gene="CYP2D6", genotype=cyp2d6,
                effect="Ultra-rapid metabolism - risk of toxicity",
                recommendation="Avoid codeine, risk of overdose",
                risk_level="high",
            ))

    cyp2c19 = genes.get("CYP2C19")
    if cyp2c19 is not None and "Poor" in cyp2c19:
        insights.append(PharmacogenomicInsight(
            medication="Omeprazole", gene="CYP2C19", genotype=cyp2c19,
            effect="Poor metabolism - reduced effectiveness",
            recommendation="Higher doses may be needed or alternative PPI",
            risk_level="medium",
        ))

    slco1b1 = genes.get("SLCO1B1")
    if slco1b1 == "CC":
        insights.append(PharmacogenomicInsight(
            medication="Atorvastatin", gene="SLCO1B1", genotype=slco1b1,
            effect="Increased risk of statin-induced myopathy",
            recommendation="Monitor for muscle pain, consider lower doses",
            risk_level="medium",
        ))
    elif slco1b1 in ("CT", "TT"):
        insights.append(PharmacogenomicInsight(
            medication="Atorvastatin", gene="SLCO1B1", genotype=slco1b1,
            effect="Significantly increased risk of myopathy",
            recommendation="Avoid statins or use very low doses with monitoring",
            risk_level="high",
        ))

    return insights


# ======================================================================
# Nutrigenomics
# ======================================================================


def _supplement(
    gene: str, genotype: str, supplement: str, rationale: str,
    dosage: str, timing: str, priority: str = "medium",
) -> NutrigenomicRecommendation:
    return NutrigenomicRecommendation(
        gene=gene, genotype=genotype, supplement=supplement, rationale=rationale,
        dosage=dosage, timing=timing, priority=priority,
    )


def get_nutrigenomics_recommendations(
    profiles: Sequence[GeneticProfile],
) -> list[NutrigenomicRecommendation]:
    genes = genotype_map(profiles)
    recs: list[NutrigenomicRecommendation] = []

    mthfr = genes.get("MTHFR")
    if mthfr in ("TT", "CT"):
        recs.append(_supplement(
            "MTHFR", mthfr, "Methylated Folate (5-MTHF)",
            "Reduced enzyme activity affects folate metabolism",
            "400-800 mcg daily", "With breakfast for better absorption",
            priority="high" if mthfr == "TT" else "medium",
        ))

    vdr = genes.get("VDR")
    if vdr in ("FF", "Ff"):
        recs.append(_supplement(
            "VDR", vdr, "Vitamin D3",
            "Reduced vitamin D receptor sensitivity",
            "2000-4000 IU daily (with blood testing)",
            "With fat-containing meal for better absorption",
            priority="high",
        ))

    fto = genes.get("FTO")
    if fto in ("AA", "AT"):
        recs.append(_supplement(
            "FTO", fto, "Green Tea Extract (EGCG)",
            "Increased risk of weight gain, enhanced fat oxidation support",
            "250-500 mg EGCG daily", "30 minutes before exercise",
        ))

    actn3 = genes.get("ACTN3")
    if actn3 == "XX":
        recs.append(_supplement(
            "ACTN3", actn3, "Creatine Monohydrate",
            "Reduced power/strength potential, creatine can help",
            "3-5g daily", "Post-workout with carbohydrates",
        ))
    elif actn3 == "RR":
        recs.append(_supplement(
            "ACTN3", actn3, "Beta-Alanine",
            "Enhanced power capacity, buffering support",
            "3-5g daily (divided doses)", "Pre-workout",
        ))

    ppargc1a = genes.get("PPARGC1A")
    if ppargc1a is not None and "Ser" in ppargc1a:
        recs.append(_supplement(
            "PPARGC1A", ppargc1a, "Resveratrol",
            "Enhanced mitochondrial biogenesis response",
            "250-500mg daily", "With dinner",
        ))
        recs.append(_supplement(
            "PPARGC1A", ppargc1a, "Coenzyme Q10",
            "Mitochondrial support for energy production",
            "100-200mg daily", "With breakfast",
        ))

    adrb2 = genes.get("ADRB2")
    if adrb2 == "Gly16Gly":
        recs.append(_supplement(
            "ADRB2", adrb2, "Caffeine (Genotype-Optimized)",
            "Reduced fat mobilization, strategic caffeine use",
            "100-200mg (lower than typical doses)", "Pre-workout (avoid late in day)",
        ))

    nos3 = genes.get("NOS3")
    if nos3 in ("CC", "CT"):
        recs.append(_supplement(
            "NOS3", nos3, "L-Citrulline",
            "Enhanced nitric oxide production support",
            "6-8g daily", "30 minutes before exercise",
        ))

    return recs


# ======================================================================
# Recovery gene panel
# ======================================================================


class _PanelGene(NamedTuple):
    gene: str
    trait: str
    # (first genotype, middle genotype); anything else is the third case
    genotypes: tuple[str, str]
    impacts: tuple[str, str, str]
    protocols: tuple[str, str, str]
    high_priority_genotype: str
    default_priority: str = "medium"


_RECOVERY_PANEL: list[_PanelGene] = [
    _PanelGene(
        "IL6", "Inflammatory Response", ("GG", "GC"),
        (
            "Higher baseline inflammation, slower recovery",
            "Moderate inflammation response",
            "Lower baseline inflammation, faster recovery",
        ),
        (
            "Emphasize anti-inflammatory nutrition (omega-3s, turmeric), longer recovery periods",
            "Standard recovery protocols with attention to inflammation markers",
            "May recover quickly with standard protocols",
        ),
        "GG",
    ),
    _PanelGene(
        "TNF", "Inflammatory Cytokine Production", ("AA", "AG"),
        (
            "Higher TNF-alpha production, increased inflammation",
            "Moderate TNF-alpha production",
            "Lower TNF-alpha production, reduced inflammation",
        ),
        (
            "Prioritize anti-inflammatory interventions (cryotherapy, massage), monitor CRP levels",
            "Standard anti-inflammatory approaches sufficient",
            "May require less intensive anti-inflammatory interventions",
        ),
        "AA",
    ),
    _PanelGene(
        "IL10", "Anti-inflammatory Response", ("AA", "AC"),
        (
            "Higher IL-10 production, better inflammation control",
            "Moderate IL-10 production",
            "Lower IL-10 production, reduced anti-inflammatory capacity",
        ),
        (
            "May recover well with standard protocols",
            "Standard recovery protocols appropriate",
            "Emphasize anti-inflammatory nutrition and recovery modalities",
        ),
        "CC",
        default_priority="low",
    ),
    _PanelGene(
        "VDR", "Vitamin D Receptor Sensitivity", ("FF", "Ff"),
        (
            "Reduced vitamin D receptor sensitivity, potential deficiency effects",
            "Moderate sensitivity",
            "Normal sensitivity",
        ),
        (
            "Ensure optimal vitamin D status (supplementation if needed), supports immune function",
            "Monitor vitamin D levels, supplement as needed",
            "Maintain adequate vitamin D through sun exposure and diet",
        ),
        "FF",
    ),
    _PanelGene(
        "ADRB1", "Catecholamine Sensitivity", ("AA", "AG"),
        (
            "Higher adrenaline sensitivity, increased stress response",
            "Moderate sensitivity",
            "Lower adrenaline sensitivity, reduced stress response",
        ),
        (
            "Emphasize parasympathetic activation (meditation, breathing), avoid overstimulation",
            "Standard stress management techniques",
            "May tolerate higher stimulation, monitor for under-recovery",
        ),
        "AA",
    ),
    _PanelGene(
        "CLOCK", "Circadian Rhythm Regulation", ("AA", "AG"),
        (
            "Enhanced circadian sensitivity, strict schedule benefits",
            "Moderate circadian sensitivity",
            "Reduced circadian sensitivity, more flexible timing",
        ),
        (
            "Maintain strict sleep/wake times, minimize blue light exposure 2h before bed",
            "Consistent schedule beneficial but some flexibility allowed",
            "More adaptable to schedule changes, but still prioritize consistency",
        ),
        "AA",
    ),
    _PanelGene(
        "HSD11B1", "Cortisol Regeneration", ("TT", "TC"),
        (
            "Higher cortisol regeneration, increased stress response",
            "Moderate cortisol regeneration",
            "Lower cortisol regeneration, reduced stress response",
        ),
        (
            "Prioritize stress management, cortisol-lowering interventions (adaptogens, meditation)",
            "Standard stress management sufficient",
            "May be more resilient to stress, but still monitor recovery markers",
        ),
        "TT",
    ),
    _PanelGene(
        "COMT", "Catecholamine Breakdown", ("AA", "AG"),
        (
            "Slower breakdown of adrenaline/noradrenaline, prolonged stress response",
            "Moderate breakdown rate",
            "Faster breakdown, quicker return to baseline",
        ),
        (
            "Emphasize parasympathetic activation, longer recovery periods after high-stress sessions",
            "Standard recovery protocols appropriate",
            "May recover quickly but monitor for under-recovery from overtraining",
        ),
        "AA",
    ),
]


def get_recovery_gene_panel(profiles: Sequence[GeneticProfile]) -> list[RecoveryGeneMarker]:
    """Recovery-related markers present in the profile, in panel order."""
    genes = genotype_map(profiles)
    markers: list[RecoveryGeneMarker] = []

    for entry in _RECOVERY_PANEL:
        genotype = genes.get(entry.gene)
        if not genotype:
            continue
        if genotype == entry.genotypes[0]:
            idx = 0
        elif genotype == entry.genotypes[1]:
            idx = 1
        else:
            idx = 2
        priority = "high" if genotype == entry.high_priority_genotype else entry.default_priority
        markers.append(RecoveryGeneMarker(
            gene=entry.gene,
            genotype=genotype,
            trait=entry.trait,
            impact=entry.impacts[idx],
            protocol=entry.protocols[idx],
            priority=priority,
        ))

    return markers
