"""
Synthetic demo squad.

Generates a Rugby Sevens squad of 24 athletes with 70 nights of
biometrics, a full genetic panel, one body composition scan and one
blood panel each.  Generation is driven by a seeded ``random.Random`` so
the same seed always yields the same squad.
"""

import datetime
import logging
import math
import random
from dataclasses import dataclass, field

from sqlmodel import Session

from app.models.athlete import Athlete
from app.models.biometric import BiometricData
from app.models.blood_results import BloodResult
from app.models.body_composition import BodyComposition
from app.models.genetics import Gene, GeneticProfile

logger = logging.getLogger(__name__)

DEMO_TEAM = "Rugby Sevens Team"
DEMO_SPORT = "Rugby Sevens"
DEMO_START = datetime.date(2025, 7, 10)
DEMO_DAYS = 70
DEMO_SCAN_DATE = datetime.date(2025, 9, 1)
DEMO_BLOOD_DATE = datetime.date(2025, 9, 5)

SQUAD: list[tuple[str, int]] = [
    ("Aden Oerson", 22), ("Aldrich Wichman", 19), ("Bowen Bezuidenhoudt", 23),
    ("Christiaan Tromp", 22), ("Dijan Labuschagne", 19), ("Ethan Gordon", 20),
    ("George Evans", 18), ("Ethan Isaacs", 21), ("James Nero", 20),
    ("Joshua De Kock", 23), ("Juanre De Klerk", 19), ("Lezane Botto", 19),
    ("Luke Prest", 18), ("Marquel Miller", 18), ("Matthew Jacobs", 23),
    ("Michael Maseti", 21), ("Nicholas Fritz", 18), ("Riego Heath", 22),
    ("Ritchie Mitchell", 20), ("Siphiwe Mazibuko", 27), ("Souheil Tahiri", 18),
    ("Steffan De Jongh", 18), ("Torbyn Visser", 22), ("Emile Demant", 24),
]

METABOLIZER_STATUSES = ("Poor", "Intermediate", "Extensive", "Ultra")

# gene -> (category, possible genotypes)
GENE_PANEL: dict[str, tuple[str, tuple[str, ...]]] = {
    "ACTN3": ("performance", ("RR", "RX", "XX")),
    "ACE": ("performance", ("II", "ID", "DD")),
    "PPARGC1A": ("performance", ("Gly482Gly", "Ser482Ser", "Gly482Ser")),
    "ADRB2": ("performance", ("Arg16Arg", "Arg16Gly", "Gly16Gly")),
    "VDR": ("nutrition", ("FF", "Ff", "ff")),
    "COL1A1": ("injury", ("SS", "SP", "PP")),
    "IL6": ("inflammation", ("GG", "GC", "CC")),
    "TNF": ("inflammation", ("GG", "GA", "AA")),
    "IL10": ("inflammation", ("GG", "GA", "AA")),
    "ADRB1": ("cardiovascular", ("AA", "AG", "GG")),
    "CLOCK": ("circadian", ("TT", "TC", "CC")),
    "HSD11B1": ("stress", ("TT", "TC", "CC")),
    "COMT": ("stress", ("AA", "AG", "GG")),
    "MTHFR": ("nutrition", ("CC", "CT", "TT")),
    "FTO": ("nutrition", ("AA", "AT", "TT")),
    "NOS3": ("cardiovascular", ("GG", "GT", "TT")),
    "SLCO1B1": ("pharmacogenomics", ("TT", "TC", "CC")),
    "VKORC1": ("pharmacogenomics", ("GG", "GA", "AA")),
    "CFTR": ("respiratory", ("FF", "Fdel", "deldel")),
    "CYP2D6": ("pharmacogenomics", tuple(f"{s} Metabolizer" for s in METABOLIZER_STATUSES)),
    "CYP2C19": ("pharmacogenomics", tuple(f"{s} Metabolizer" for s in METABOLIZER_STATUSES)),
}


@dataclass
class DemoAthlete:
    athlete: Athlete
    biometrics: list[BiometricData] = field(default_factory=list)
    genetics: list[GeneticProfile] = field(default_factory=list)
    body_composition: list[BodyComposition] = field(default_factory=list)
    blood_results: list[BloodResult] = field(default_factory=list)


def athlete_code(index: int) -> str:
    return f"ATH{index + 1:03d}"


def _hhmm(rng: random.Random, first_hour: int) -> datetime.time:
    return datetime.time(first_hour + rng.randrange(2), rng.randrange(60))


def make_biometrics(rng: random.Random, day: int) -> BiometricData:
    """One night of biometrics for day ``day`` of the demo window."""
    hrv = 40 + math.sin(day * 0.4) * 5 + rng.uniform(0, 3)
    deep = 15 + rng.uniform(0, 10)
    rem = 15 + rng.uniform(0, 8)
    return BiometricData(
        athlete_id=0,
        date=DEMO_START + datetime.timedelta(days=day),
        hrv_night=round(hrv),
        resting_hr=round(55 + rng.uniform(0, 15)),
        spo2_night=round(96.0 + rng.uniform(0, 3.5), 1),
        resp_rate_night=round(14 + rng.uniform(0, 5), 1),
        deep_sleep_pct=round(deep),
        rem_sleep_pct=round(rem),
        light_sleep_pct=round(100 - deep - rem),
        sleep_duration_h=round(7 + rng.uniform(0, 2), 1),
        temp_trend_c=round(36.8 + rng.uniform(0, 0.4), 1),
        training_load_pct=round(70 + rng.uniform(0, 30)),
        sleep_onset_time=_hhmm(rng, 22),
        wake_time=_hhmm(rng, 6),
    )


def make_body_composition(rng: random.Random, age: int) -> BodyComposition:
    weight = 80 + rng.uniform(0, 20)
    height = 1.75 + rng.uniform(0, 0.15)
    fat_pct = 12 + rng.uniform(0, 8)
    fat = weight * fat_pct / 100
    muscle = weight * (45 + rng.uniform(0, 5)) / 100
    skeletal = muscle * (0.85 + rng.uniform(0, 0.05))

    def limb(share: float) -> float:
        return round(muscle * share * (0.95 + rng.uniform(0, 0.1)), 1)

    return BodyComposition(
        athlete_id=0,
        date=DEMO_SCAN_DATE,
        weight_kg=round(weight, 1),
        weight_kg_min=round(weight - 0.5 - rng.uniform(0, 0.5), 1),
        weight_kg_max=round(weight + 0.5 + rng.uniform(0, 0.5), 1),
        body_fat_kg=round(fat, 1),
        body_fat_kg_min=round(fat * 0.9, 1),
        body_fat_kg_max=round(fat * 1.1, 1),
        muscle_mass_kg=round(muscle, 1),
        muscle_mass_kg_min=round(muscle * 0.95, 1),
        muscle_mass_kg_max=round(muscle * 1.05, 1),
        skeletal_muscle_kg=round(skeletal, 1),
        body_fat_rate=round(fat_pct, 1),
        bmi=round(weight / (height * height), 1),
        target_weight_kg=round(weight, 1),
        visceral_fat_grade=1 + rng.randrange(2),
        basal_metabolic_rate_kcal=round(1500 + weight * 10 + rng.uniform(0, 200)),
        fat_free_body_weight_kg=round(weight - fat, 1),
        subcutaneous_fat_percent=round(fat_pct * (0.7 + rng.uniform(0, 0.2)), 1),
        smi_kg_m2=round(skeletal / (height * height), 1),
        body_age=age + rng.randrange(3) - 1,
        arm_mass_left_kg=limb(0.15),
        arm_mass_right_kg=limb(0.15),
        leg_mass_left_kg=limb(0.35),
        leg_mass_right_kg=limb(0.35),
        trunk_mass_kg=round(muscle * 0.35, 1),
    )


def make_blood_result(rng: random.Random) -> BloodResult:
    """A panel that mostly sits inside the reference ranges."""
    neutrophils = round(rng.uniform(2.0, 6.5), 2)
    lymphocytes = round(rng.uniform(1.2, 3.2), 2)
    return BloodResult(
        athlete_id=0,
        date=DEMO_BLOOD_DATE,
        cortisol_nmol_l=round(rng.uniform(180, 600)),
        testosterone=round(rng.uniform(12, 32), 1),
        vitamin_d=round(rng.uniform(50, 125)),
        ck=round(rng.uniform(90, 450)),
        fasting_glucose=round(rng.uniform(4.0, 5.6), 1),
        hba1c=round(rng.uniform(4.8, 5.6), 1),
        urea=round(rng.uniform(3.5, 7.5), 1),
        creatinine=round(rng.uniform(70, 115)),
        egfr=round(rng.uniform(85, 120)),
        s_alanine_transaminase=round(rng.uniform(12, 45)),
        s_aspartate_transaminase=round(rng.uniform(15, 40)),
        s_glutamyl_transferase=round(rng.uniform(10, 40)),
        lactate_dehydrogenase=round(rng.uniform(120, 240)),
        calcium_adjusted=round(rng.uniform(2.2, 2.6), 2),
        magnesium=round(rng.uniform(0.7, 1.0), 2),
        c_reactive_protein=round(rng.uniform(0.2, 4.0), 1),
        hemoglobin=round(rng.uniform(13.2, 17.0), 1),
        hematocrit=round(rng.uniform(0.40, 0.50), 2),
        wbc=round(neutrophils + lymphocytes + rng.uniform(0.3, 0.9), 1),
        neutrophils=neutrophils,
        lymphocytes=lymphocytes,
        nlr=round(neutrophils / lymphocytes, 2),
        platelets=round(rng.uniform(160, 380)),
        lab_name="Demo Pathology",
    )


def generate_demo_squad(seed: int = 42) -> list[DemoAthlete]:
    """Build the squad in memory. Child records have ``athlete_id`` 0 until saved."""
    rng = random.Random(seed)
    squad: list[DemoAthlete] = []
    for index, (name, age) in enumerate(SQUAD):
        athlete = Athlete(
            athlete_code=athlete_code(index),
            name=name,
            sport=DEMO_SPORT,
            team=DEMO_TEAM,
            date_of_birth=datetime.date(DEMO_START.year - age, 1, 1 + index),
            gender="male",
            baseline_start_date=DEMO_START,
        )
        squad.append(DemoAthlete(
            athlete=athlete,
            biometrics=[make_biometrics(rng, day) for day in range(DEMO_DAYS)],
            genetics=[
                GeneticProfile(athlete_id=0, gene=gene, genotype=rng.choice(genotypes))
                for gene, (_, genotypes) in GENE_PANEL.items()
            ],
            body_composition=[make_body_composition(rng, age)],
            blood_results=[make_blood_result(rng)],
        ))
    return squad


def seed_demo_data(session: Session, seed: int = 42) -> int:
    """
    Insert the gene catalog and demo squad.

    Returns:
        Number of athletes inserted.
    """
    for gene, (category, _) in GENE_PANEL.items():
        session.add(Gene(name=gene, category=category))

    squad = generate_demo_squad(seed)
    for member in squad:
        session.add(member.athlete)
        session.flush()
        children = (member.biometrics + member.genetics
                    + member.body_composition + member.blood_results)
        for record in children:
            record.athlete_id = member.athlete.id
            session.add(record)
        logger.debug("Seeded %s (%s)", member.athlete.athlete_code, member.athlete.name)

    session.commit()
    logger.info("Seeded %d demo athletes", len(squad))
    return len(squad)
