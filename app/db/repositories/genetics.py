"""
Genetics repositories.

Handles database operations for GeneticProfile rows and the Gene catalog.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.genetics import Gene, GeneticProfile


class GeneticProfileRepository:
    """Repository for GeneticProfile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete(self, athlete_id: int) -> list[GeneticProfile]:
        statement = (
            select(GeneticProfile)
            .where(GeneticProfile.athlete_id == athlete_id)
            .order_by(GeneticProfile.id)
        )
        return list(self.session.exec(statement).all())

    def get_by_athlete_and_gene(
        self, athlete_id: int, gene: str,
    ) -> Optional[GeneticProfile]:
        statement = select(GeneticProfile).where(
            GeneticProfile.athlete_id == athlete_id,
            GeneticProfile.gene == gene,
        )
        return self.session.exec(statement).first()

    def get_by_athletes(self, athlete_ids: list[int]) -> list[GeneticProfile]:
        if not athlete_ids:
            return []
        statement = (
            select(GeneticProfile)
            .where(GeneticProfile.athlete_id.in_(athlete_ids))
            .order_by(GeneticProfile.athlete_id, GeneticProfile.id)
        )
        return list(self.session.exec(statement).all())

    def get_all(self) -> list[GeneticProfile]:
        statement = select(GeneticProfile).order_by(GeneticProfile.athlete_id, GeneticProfile.id)
        return list(self.session.exec(statement).all())

    def get_by_genes(self, genes: list[str]) -> list[GeneticProfile]:
        statement = (
            select(GeneticProfile)
            .where(GeneticProfile.gene.in_(genes))
            .order_by(GeneticProfile.athlete_id, GeneticProfile.id)
        )
        return list(self.session.exec(statement).all())

    def get_by_category(self, category: str) -> list[GeneticProfile]:
        """Profile rows whose gene belongs to a catalog category."""
        statement = (
            select(GeneticProfile)
            .join(Gene, Gene.name == GeneticProfile.gene)
            .where(Gene.category == category)
            .order_by(GeneticProfile.athlete_id, GeneticProfile.id)
        )
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(GeneticProfile)).one()

    def save(self, entry: GeneticProfile) -> None:
        """Stage an insert or update (caller commits)."""
        self.session.add(entry)

    def commit(self) -> None:
        self.session.commit()

    def delete_by_athlete(self, athlete_id: int) -> None:
        """Remove every row of an athlete (caller commits)."""
        for entry in self.get_by_athlete(athlete_id):
            self.session.delete(entry)


class GeneRepository:
    """Repository for the Gene catalog."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, gene: Gene) -> Gene:
        self.session.add(gene)
        self.session.commit()
        self.session.refresh(gene)
        return gene

    def get_by_name(self, name: str) -> Optional[Gene]:
        statement = select(Gene).where(Gene.name == name)
        return self.session.exec(statement).first()

    def get_all(self, category: Optional[str] = None) -> list[Gene]:
        statement = select(Gene)
        if category is not None:
            statement = statement.where(Gene.category == category)
        statement = statement.order_by(Gene.name)
        return list(self.session.exec(statement).all())
