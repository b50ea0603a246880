"""Application commands (use cases) for furniture generation and quoting."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from furniture.application.config.adapter import build_request, project_catalogs
from furniture.application.config.catalogs import default_catalogs
from furniture.application.config.schemas import FurnitureConfig, ProjectConfig
from furniture.domain import CatalogMissError, Catalogs, ConfigError, generator_for
from furniture.domain.services import (
    DEFAULT_MARGIN_PERCENT,
    BomBuilder,
    CutListEstimator,
    HardwareInference,
    calculate_cost,
    consolidate_boms,
    consolidate_costs,
    synthesize_assembly,
)

from .dtos import FurnitureOutcome, FurnitureRequest, FurnitureResult, ProjectQuote

logger = logging.getLogger(__name__)


class GenerateFurnitureCommand:
    """Command running the full pipeline for one furniture.

    Parts, hardware, BOM, cut list, cost and assembly steps are produced
    in one pass. A configuration problem is returned as the outcome's
    ``error``; it is never raised to the caller.
    """

    def __init__(
        self,
        catalogs: Catalogs | None = None,
        bom_builder: BomBuilder | None = None,
        cut_list_estimator: CutListEstimator | None = None,
    ) -> None:
        self.catalogs = catalogs or default_catalogs()
        self.bom_builder = bom_builder or BomBuilder()
        self.cut_list_estimator = cut_list_estimator or CutListEstimator()

    def execute(
        self,
        request: FurnitureRequest,
        margin_percent: float = DEFAULT_MARGIN_PERCENT,
    ) -> FurnitureOutcome:
        """Execute the generation command.

        Args:
            request: Furniture params, modules, material and finish.
            margin_percent: Margin applied to the cost.

        Returns:
            FurnitureOutcome holding either the result or the ConfigError.
        """
        try:
            result = self._run(request, margin_percent)
        except ConfigError as e:
            logger.debug(f"Furniture '{request.furniture_id}' rejected: {e.message}")
            return FurnitureOutcome(request.furniture_id, error=e)
        except CatalogMissError as e:
            return FurnitureOutcome(
                request.furniture_id,
                error=ConfigError(
                    str(e),
                    error_type="catalog_miss",
                    details=[{"path": e.catalog, "message": str(e), "value": e.item_id}],
                ),
            )
        return FurnitureOutcome(request.furniture_id, result=result)

    def execute_config(
        self,
        furniture: FurnitureConfig,
        margin_percent: float = DEFAULT_MARGIN_PERCENT,
    ) -> FurnitureOutcome:
        """Build the domain request from a furniture entry and execute it."""
        try:
            request = build_request(furniture)
        except ConfigError as e:
            return FurnitureOutcome(furniture.id, error=e)
        return self.execute(request, margin_percent)

    def _run(self, request: FurnitureRequest, margin_percent: float) -> FurnitureResult:
        furniture_id = request.furniture_id
        generator = generator_for(request.params)
        plan = generator.plan(
            furniture_id,
            request.params,
            request.modules,
            self.catalogs.materials,
            request.material_id,
            request.finish_id,
        )
        parts = generator.build_parts(plan)
        hardware = HardwareInference(self.catalogs).from_plan(generator, plan)
        bom = self.bom_builder.build(furniture_id, parts, hardware.items, self.catalogs)
        cut_list = self.cut_list_estimator.estimate(parts, self.catalogs)
        cost = calculate_cost(furniture_id, bom, margin_percent)
        steps = synthesize_assembly(parts, hardware.items, plan.modules)

        warnings = [
            *plan.warnings,
            *hardware.warnings,
            *(issue.message for issue in bom.issues),
            *cut_list.warnings,
        ]
        logger.info(
            f"Generated '{furniture_id}': {len(parts)} parts, "
            f"{len(hardware.items)} hardware lines, total {cost.sale_price:.2f}"
        )
        return FurnitureResult(
            furniture_id=furniture_id,
            name=request.display_name,
            family=request.params.family.value,
            parts=tuple(parts),
            hardware=hardware.items,
            bom=bom,
            cut_list=cut_list,
            cost=cost,
            assembly_steps=tuple(steps),
            warnings=tuple(warnings),
        )


class QuoteProjectCommand:
    """Command quoting every furniture of a project.

    Furnitures are generated independently. Invalid ones are reported
    in the quote and left out of the consolidated totals.
    """

    def __init__(
        self,
        catalogs: Catalogs | None = None,
        bom_builder: BomBuilder | None = None,
        cut_list_estimator: CutListEstimator | None = None,
    ) -> None:
        self.catalogs = catalogs
        self.bom_builder = bom_builder or BomBuilder()
        self.cut_list_estimator = cut_list_estimator or CutListEstimator()

    def execute(
        self,
        config: ProjectConfig,
        margin_percent: float | None = None,
    ) -> ProjectQuote:
        """Quote a project file.

        Args:
            config: Validated project configuration.
            margin_percent: Overrides the project's profit margin when given.

        Returns:
            The consolidated ProjectQuote.
        """
        catalogs = project_catalogs(config, self.catalogs)
        margin = config.project.profit_margin if margin_percent is None else margin_percent
        command = self._furniture_command(catalogs)
        outcomes = [command.execute_config(f, margin) for f in config.furnitures]
        return self._consolidate(
            config.project.name, config.project.currency, outcomes, catalogs
        )

    def execute_requests(
        self,
        requests: Sequence[FurnitureRequest],
        margin_percent: float = DEFAULT_MARGIN_PERCENT,
        name: str = "Untitled project",
        currency: str = "USD",
    ) -> ProjectQuote:
        """Quote already-built furniture requests."""
        catalogs = self.catalogs or default_catalogs()
        command = self._furniture_command(catalogs)
        outcomes = [command.execute(request, margin_percent) for request in requests]
        return self._consolidate(name, currency, outcomes, catalogs)

    def _furniture_command(self, catalogs: Catalogs) -> GenerateFurnitureCommand:
        return GenerateFurnitureCommand(
            catalogs=catalogs,
            bom_builder=self.bom_builder,
            cut_list_estimator=self.cut_list_estimator,
        )

    def _consolidate(
        self,
        name: str,
        currency: str,
        outcomes: list[FurnitureOutcome],
        catalogs: Catalogs,
    ) -> ProjectQuote:
        results = [o.result for o in outcomes if o.result is not None]
        for outcome in outcomes:
            if outcome.error is not None:
                logger.warning(
                    f"Furniture '{outcome.furniture_id}' excluded from the quote: "
                    f"{outcome.error.message.splitlines()[0]}"
                )
        cut_list = self.cut_list_estimator.estimate(
            [part for result in results for part in result.parts], catalogs
        )
        return ProjectQuote(
            name=name,
            currency=currency,
            outcomes=outcomes,
            bom=consolidate_boms([r.bom for r in results]),
            cost=consolidate_costs([r.cost for r in results]),
            cut_list=cut_list,
            warnings=[w for r in results for w in r.warnings],
        )
