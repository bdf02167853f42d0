"""Application commands (use cases) for cabinet generation."""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from kitchen_cabinets.domain import (
    Cabinet,
    CabinetError,
    CabinetGenerator,
    CabinetStyle,
    CutListBuilder,
    CutListItem,
    DrillPattern,
    DrillPatternLibrary,
    LengthUnit,
    MaterialEstimator,
    TemplateCatalog,
    apply_patch,
)

from .dtos import CabinetRequest, GenerationOutput

logger = logging.getLogger(__name__)


class GenerateCabinetCommand:
    """Command to generate a cabinet with its cut list and material estimate.

    The command holds no per-request state, so one instance can serve
    concurrent callers; ``execute_batch`` relies on this.
    """

    def __init__(
        self,
        generator: CabinetGenerator | None = None,
        cut_list_builder: CutListBuilder | None = None,
        material_estimator: MaterialEstimator | None = None,
        pattern_library: DrillPatternLibrary | None = None,
        catalog: TemplateCatalog | None = None,
    ) -> None:
        self.generator = generator or CabinetGenerator()
        self.cut_list_builder = cut_list_builder or CutListBuilder()
        self.material_estimator = material_estimator or MaterialEstimator()
        self.pattern_library = pattern_library or DrillPatternLibrary()
        self.catalog = catalog or TemplateCatalog()

    def execute(self, request: CabinetRequest) -> GenerationOutput:
        """Execute the generation command.

        Validation problems and domain errors are reported in the output's
        ``errors`` list; nothing is partially generated.

        Args:
            request: The cabinet to generate.

        Returns:
            GenerationOutput with the cabinet, sorted cut list and estimates.
        """
        errors = request.validate()
        if errors:
            return GenerationOutput(request=request, cabinet=None, errors=errors)

        try:
            cabinet = self._build_cabinet(request)
            cut_list = self.cut_list_builder.build(cabinet)
            cut_list, patterns = self._attach_patterns(cut_list, request.drill_patterns)
        except (CabinetError, ValueError) as e:
            logger.debug(f"Cabinet generation failed: {e}")
            return GenerationOutput(request=request, cabinet=None, errors=[str(e)])

        logger.debug(
            f"Generated {cabinet.id}: {len(cut_list)} cut list items, "
            f"{sum(item.quantity for item in cut_list)} panels"
        )

        cut_list = self.cut_list_builder.sort_by_size(cut_list)
        return GenerationOutput(
            request=request,
            cabinet=cabinet,
            cut_list=cut_list,
            material_estimates=self.material_estimator.estimate(cut_list),
            total_estimate=self.material_estimator.estimate_total(cut_list),
            drill_patterns=patterns,
        )

    def execute_batch(
        self,
        requests: Sequence[CabinetRequest],
        max_workers: int | None = None,
    ) -> list[GenerationOutput]:
        """Generate several cabinets in parallel.

        Results are returned in request order. A failing request does not
        affect the others; its output carries the errors.

        Cabinets that were not given an explicit id get a ``-2``, ``-3``...
        suffix when their derived id is already taken in the batch, so cut
        list item ids stay unique across the whole batch.
        """
        if not requests:
            return []
        logger.debug(f"Generating {len(requests)} cabinets")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(self.execute, requests))
        return self._with_unique_ids(results)

    def _with_unique_ids(
        self, results: list[GenerationOutput]
    ) -> list[GenerationOutput]:
        taken = {
            r.cabinet.id
            for r in results
            if r.is_valid and r.request.cabinet_id is not None
        }
        unique = []
        for result in results:
            if not result.is_valid or result.request.cabinet_id is not None:
                unique.append(result)
                continue
            cabinet_id = result.cabinet.id
            n = 2
            while cabinet_id in taken:
                cabinet_id = f"{result.cabinet.id}-{n}"
                n += 1
            if cabinet_id != result.cabinet.id:
                logger.debug(f"Renaming duplicate cabinet {result.cabinet.id} to {cabinet_id}")
                result = self.execute(
                    dataclasses.replace(result.request, cabinet_id=cabinet_id)
                )
            taken.add(cabinet_id)
            unique.append(result)
        return unique

    def _build_cabinet(self, request: CabinetRequest) -> Cabinet:
        if request.template is not None:
            template = self.catalog.require_template(request.template)
            cabinet = self.generator.from_template(
                template,
                door_style=request.door_style,
                material=request.material,
                include_back=request.include_back,
                cabinet_id=request.cabinet_id,
            )
            patch = {
                key: value
                for key, value in (
                    ("style", request.style),
                    ("door_count", request.door_count),
                    ("shelf_count", request.shelf_count),
                    ("depth", request.depth),
                )
                if value is not None
            }
            cabinet = apply_patch(cabinet, patch)
        else:
            cabinet = self.generator.generate(
                request.cabinet_type,
                request.width,
                request.height,
                request.depth,
                style=request.style or CabinetStyle.EURO,
                door_style=request.door_style,
                material=request.material,
                door_count=request.door_count,
                shelf_count=request.shelf_count,
                include_back=request.include_back,
                cabinet_id=request.cabinet_id,
            )

        unit = LengthUnit(request.unit)
        if unit is not cabinet.unit:
            cabinet = dataclasses.replace(
                cabinet,
                dimensions=cabinet.dimensions.converted(unit),
                door_thickness=cabinet.unit.convert(
                    cabinet.effective_door_thickness, unit
                ),
            )
        return cabinet

    def _attach_patterns(
        self,
        cut_list: list[CutListItem],
        assignments: dict[str, list[str]],
    ) -> tuple[list[CutListItem], dict[str, DrillPattern]]:
        patterns: dict[str, DrillPattern] = {}
        result = []
        for item in cut_list:
            for pattern_id in assignments.get(item.panel_type.value, []):
                item = self.pattern_library.attach_pattern(item, pattern_id)
                patterns[pattern_id] = self.pattern_library.require_pattern(pattern_id)
            result.append(item)
        return result, patterns
