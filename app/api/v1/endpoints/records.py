"""
Cross-athlete record endpoints.

Squad-wide listings of biometric data, genetic profiles, body
composition scans and blood panels, plus the gene catalog.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.biometric import BiometricDataResponse
from app.schemas.blood_results import BloodResultResponse
from app.schemas.body_composition import BodyCompositionResponse
from app.schemas.genetics import GeneCreate, GeneQuery, GeneResponse, GeneticProfileResponse
from app.services.biometric_service import BiometricService
from app.services.blood_result_service import BloodResultService
from app.services.body_composition_service import BodyCompositionService
from app.services.genetics_service import GeneticsService

router = APIRouter()


@router.get("/biometric-data", summary="List biometric records across athletes.",
            response_model=list[BiometricDataResponse], tags=["Biometric data"])
def list_biometric_data(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                        end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                        skip: int = Query(0, ge=0), limit: int = Query(1000, ge=1, le=10000),
                        db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return BiometricService(db).get_all(start, end, skip, limit)


@router.get("/biometric-data/latest", summary="Latest biometric record per athlete.",
            response_model=list[BiometricDataResponse], tags=["Biometric data"])
def latest_biometric_data(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return BiometricService(db).get_latest_per_athlete()


@router.get("/genetic-profiles", summary="All genetic profiles.",
            response_model=list[GeneticProfileResponse], tags=["Genetics"])
def list_genetic_profiles(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return GeneticsService(db).get_all_profiles()


@router.get("/genetic-profiles/category/{category}",
            summary="Profiles restricted to genes of a catalog category.",
            response_model=list[GeneticProfileResponse], tags=["Genetics"])
def genetic_profiles_by_category(category: str, db: Session = Depends(get_db),
                                 user: User = Depends(get_current_user)):
    return GeneticsService(db).get_profiles_by_category(category)


@router.post("/genetic-profiles/genes", summary="Profiles carrying any of the given genes.",
             response_model=list[GeneticProfileResponse], tags=["Genetics"])
def genetic_profiles_by_genes(query: GeneQuery, db: Session = Depends(get_db),
                              user: User = Depends(get_current_user)):
    return GeneticsService(db).get_profiles_by_genes(query.genes)


@router.get("/genes", summary="Gene catalog.", response_model=list[GeneResponse], tags=["Genetics"])
def list_genes(category: Optional[str] = Query(None, description="Category filter"),
               db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return GeneticsService(db).list_genes(category)


@router.post("/genes", summary="Add a gene to the catalog.", response_model=GeneResponse,
             status_code=status.HTTP_201_CREATED, tags=["Genetics"])
def create_gene(data: GeneCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """
    Raises:
        HTTPException 400: If the gene is already in the catalog
    """
    return GeneticsService(db).create_gene(data)


@router.get("/body-composition", summary="All body composition scans.",
            response_model=list[BodyCompositionResponse], tags=["Body composition"])
def list_body_composition(skip: int = Query(0, ge=0), limit: int = Query(1000, ge=1, le=10000),
                          db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return BodyCompositionService(db).list_all(skip, limit)


@router.get("/blood-results", summary="All blood panels.",
            response_model=list[BloodResultResponse], tags=["Blood results"])
def list_blood_results(skip: int = Query(0, ge=0), limit: int = Query(1000, ge=1, le=10000),
                       db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return BloodResultService(db).list_all(skip, limit)
