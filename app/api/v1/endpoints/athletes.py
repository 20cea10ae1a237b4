"""
Athlete endpoints.

Roster CRUD plus per-athlete biometric, genetic, body composition and
blood result routes.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.athlete import AthleteAllData, AthleteCreate, AthleteResponse, AthleteUpdate
from app.schemas.biometric import BiometricDataCreate, BiometricDataResponse
from app.schemas.blood_results import BloodResultCreate, BloodResultResponse
from app.schemas.body_composition import BodyCompositionCreate, BodyCompositionResponse
from app.schemas.genetics import GeneticProfileResponse, GeneticProfileUpdate
from app.services.athlete_service import AthleteService
from app.services.biometric_service import BiometricService
from app.services.blood_result_service import BloodResultService
from app.services.body_composition_service import BodyCompositionService
from app.services.genetics_service import GeneticsService

router = APIRouter()


@router.get("", summary="List athletes.", response_model=list[AthleteResponse])
def list_athletes(team: Optional[str] = Query(None, description="Team filter"),
                  active_only: bool = Query(False, description="Only active athletes"),
                  skip: int = Query(0, ge=0), limit: int = Query(100, ge=1, le=1000),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return AthleteService(db).list_athletes(team, active_only, skip, limit)


@router.post("", summary="Create an athlete.", response_model=AthleteResponse,
             status_code=status.HTTP_201_CREATED)
def create_athlete(data: AthleteCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    """
    Raises:
        HTTPException 400: If the athlete code is already taken
    """
    return AthleteService(db).create(data)


@router.get("/{athlete_code}", summary="Get an athlete.", response_model=AthleteResponse)
def get_athlete(athlete_code: str, db: Session = Depends(get_db),
                user: User = Depends(get_current_user)):
    return AthleteService(db).get_or_404(athlete_code)


@router.patch("/{athlete_code}", summary="Update an athlete.", response_model=AthleteResponse)
def update_athlete(athlete_code: str, data: AthleteUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    return AthleteService(db).update(athlete_code, data)


@router.delete("/{athlete_code}", summary="Delete an athlete and all their data.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_athlete(athlete_code: str, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    AthleteService(db).delete(athlete_code)


@router.get("/{athlete_code}/all-data", summary="Athlete with every stored record.",
            response_model=AthleteAllData)
def get_all_data(athlete_code: str, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user)):
    return AthleteService(db).get_all_data(athlete_code)


# ----------------------------------------------------------------------
# Biometric data
# ----------------------------------------------------------------------

@router.get("/{athlete_code}/biometric-data", summary="List an athlete's biometric records.",
            response_model=list[BiometricDataResponse])
def list_biometrics(athlete_code: str,
                    start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                    end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                    db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return BiometricService(db).get_for_athlete(athlete_code, start, end)


@router.put("/{athlete_code}/biometric-data/{date}",
            summary="Create or update biometric data for a date.",
            response_model=BiometricDataResponse)
def upsert_biometrics(athlete_code: str, date: datetime.date, data: BiometricDataCreate,
                      response: Response, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user)):
    """Upsert: creates the record if it doesn't exist, replaces it if it does."""
    entry, created = BiometricService(db).upsert(athlete_code, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("/{athlete_code}/biometric-data/{date}", summary="Get biometric data for a date.",
            response_model=BiometricDataResponse)
def get_biometrics(athlete_code: str, date: datetime.date, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    return BiometricService(db).get_by_date(athlete_code, date)


@router.delete("/{athlete_code}/biometric-data/{date}", summary="Delete biometric data for a date.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_biometrics(athlete_code: str, date: datetime.date, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user)):
    BiometricService(db).delete_by_date(athlete_code, date)


# ----------------------------------------------------------------------
# Genetics
# ----------------------------------------------------------------------

@router.get("/{athlete_code}/genetic-profile", summary="Get an athlete's genetic profile.",
            response_model=GeneticProfileResponse)
def get_genetic_profile(athlete_code: str, db: Session = Depends(get_db),
                        user: User = Depends(get_current_user)):
    return GeneticsService(db).get_profile(athlete_code)


@router.put("/{athlete_code}/genetic-profile", summary="Upsert gene/genotype entries.",
            response_model=GeneticProfileResponse)
def upsert_genetic_profile(athlete_code: str, data: GeneticProfileUpdate,
                           db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """Genes not present in the request are left untouched."""
    return GeneticsService(db).upsert_profile(athlete_code, data)


# ----------------------------------------------------------------------
# Body composition and blood results
# ----------------------------------------------------------------------

@router.get("/{athlete_code}/body-composition", summary="List an athlete's body composition scans.",
            response_model=list[BodyCompositionResponse])
def list_body_composition(athlete_code: str, db: Session = Depends(get_db),
                          user: User = Depends(get_current_user)):
    return BodyCompositionService(db).list_for_athlete(athlete_code)


@router.post("/{athlete_code}/body-composition", summary="Create or update a scan by date.",
             response_model=BodyCompositionResponse)
def upsert_body_composition(athlete_code: str, data: BodyCompositionCreate, response: Response,
                            db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entry, created = BodyCompositionService(db).upsert(athlete_code, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("/{athlete_code}/blood-results", summary="List an athlete's blood panels.",
            response_model=list[BloodResultResponse])
def list_blood_results(athlete_code: str, db: Session = Depends(get_db),
                       user: User = Depends(get_current_user)):
    return BloodResultService(db).list_for_athlete(athlete_code)


@router.post("/{athlete_code}/blood-results", summary="Create or update a blood panel by date.",
             response_model=BloodResultResponse)
def upsert_blood_results(athlete_code: str, data: BloodResultCreate, response: Response,
                         db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    entry, created = BloodResultService(db).upsert(athlete_code, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry
