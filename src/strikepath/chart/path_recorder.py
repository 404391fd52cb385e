"""
Interactive Path Recorder

Captures a pointer-drawn price prediction and values every sample against
the selected contract.

State machine:
    IDLE → DRAWING: begin() inside the future region of the canvas (ignored elsewhere)
    DRAWING → DRAWING: extend() appends a point when the pointer moved at
        least MIN_SAMPLE_DISTANCE px on either axis
    DRAWING → IDLE: end() (pointer-up or pointer-leave), path reported upward
    any → IDLE: clear() or select_contract(), path and cells emptied

Decay runs independently of pointer state: each tick() lowers every cell's
opacity and drops cells that reach zero.

Usage:
    >>> recorder = PathRecorder(ChartGeometry(current_price=450.0))
    >>> recorder.select_contract(contract)
    >>> recorder.begin(500, 200)
    >>> recorder.extend(520, 190)
    >>> path = recorder.end()
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from loguru import logger

from strikepath.chart.geometry import ChartGeometry
from strikepath.models.chart_state import GridCell, OptionContract, PricePoint, RecorderMode
from strikepath.pricing.pnl_mapper import PathPnLMapper, PnLValue

PathListener = Callable[[Tuple[PricePoint, ...]], None]


class PathRecorder:
    """
    Controller owning {mode, path, cells} for the prediction chart.

    Attributes:
        geometry: Screen <-> chart mapping
        mapper: Valuation service for each recorded point
        contract: Currently selected contract (None until one is chosen)
        mode: IDLE or DRAWING
    """

    MIN_SAMPLE_DISTANCE = 5.0
    TICK_DECAY = 0.005
    INSERT_DECAY = 0.02

    def __init__(
        self,
        geometry: ChartGeometry,
        mapper: Optional[PathPnLMapper] = None,
        contract: Optional[OptionContract] = None,
        min_sample_distance: float = MIN_SAMPLE_DISTANCE,
        tick_decay: float = TICK_DECAY,
        insert_decay: float = INSERT_DECAY,
    ):
        """
        Initialize recorder in IDLE with an empty path.

        Args:
            geometry: Chart geometry used to turn pixels into (price, date)
            mapper: P&L mapper (default: PathPnLMapper with 20% vol, 5% rate)
            contract: Initially selected contract
            min_sample_distance: Throttle distance in px
            tick_decay: Opacity removed per animation tick
            insert_decay: Opacity removed from older cells when a new one is added
        """
        if tick_decay <= 0:
            raise ValueError(f"tick_decay must be positive, got {tick_decay}")

        self.geometry = geometry
        self.mapper = mapper or PathPnLMapper()
        self.contract = contract
        self.min_sample_distance = min_sample_distance
        self.tick_decay = tick_decay
        self.insert_decay = insert_decay

        self.mode = RecorderMode.IDLE
        self._path: List[PricePoint] = []
        self._cells: List[GridCell] = []
        self._listeners: List[PathListener] = []

    # ==================== Queries ====================

    @property
    def path(self) -> Tuple[PricePoint, ...]:
        return tuple(self._path)

    @property
    def cells(self) -> Tuple[GridCell, ...]:
        return tuple(self._cells)

    @property
    def is_drawing(self) -> bool:
        return self.mode == RecorderMode.DRAWING

    def value_at(self, price: float, when: datetime) -> PnLValue:
        """P&L of the selected contract at (price, when)."""
        return self.mapper.value_at(price, when, self.contract)

    # ==================== Listeners ====================

    def subscribe(self, listener: PathListener) -> Callable[[], None]:
        """
        Register a callback for finalized paths.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        path = self.path
        for listener in list(self._listeners):
            listener(path)

    # ==================== Pointer input ====================

    def begin(self, x: float, y: float) -> bool:
        """
        Pointer-down. Starts a new path if (x, y) lies inside the future region.

        Returns:
            True if drawing started
        """
        if not self.geometry.in_bounds(x, y):
            return False

        self._path = []
        self._cells = []
        self.mode = RecorderMode.DRAWING
        self._record(x, y)

        logger.debug(f"Path drawing started at ({x:.0f}, {y:.0f})")
        return True

    def extend(self, x: float, y: float) -> bool:
        """
        Pointer-move. Appends a point if drawing, in bounds and past the throttle.

        Returns:
            True if a point was recorded
        """
        if self.mode != RecorderMode.DRAWING:
            return False

        if not self.geometry.in_bounds(x, y):
            return False

        if self._path:
            last = self._path[-1]
            if (abs(x - last.x) < self.min_sample_distance
                    and abs(y - last.y) < self.min_sample_distance):
                return False

        self._record(x, y)
        return True

    def end(self) -> Optional[Tuple[PricePoint, ...]]:
        """
        Pointer-up or pointer-leave. Finishes the gesture and reports the path.

        Returns:
            The completed path, or None if not drawing
        """
        if self.mode != RecorderMode.DRAWING:
            return None

        self.mode = RecorderMode.IDLE
        logger.debug(f"Path drawing finished with {len(self._path)} points")
        self._notify()
        return self.path

    def clear(self) -> None:
        """Reset to IDLE, empty path and cells, notify with an empty path."""
        self._path, self._cells = [], []
        self.mode = RecorderMode.IDLE
        self._notify()

    def select_contract(self, contract: Optional[OptionContract]) -> None:
        """
        Switch contract. Existing points were valued against the old contract,
        so they are cleared rather than recomputed.
        """
        self.contract = contract
        logger.info(f"Selected contract: {contract.symbol if contract else None}")
        self.clear()

    # ==================== Decay ====================

    def tick(self) -> int:
        """
        One animation frame of decay.

        Returns:
            Number of cells removed
        """
        before = len(self._cells)
        self._cells = self._faded(self._cells, self.tick_decay)
        return before - len(self._cells)

    @staticmethod
    def _faded(cells: List[GridCell], amount: float) -> List[GridCell]:
        for cell in cells:
            cell.fade(amount)
        return [cell for cell in cells if cell.opacity > 0]

    # ==================== Internals ====================

    def _record(self, x: float, y: float) -> None:
        today = self.mapper.clock()
        price, timestamp = self.geometry.screen_to_chart(x, y, today)
        point = PricePoint(x=x, y=y, price=price, timestamp=timestamp)
        self._path.append(point)

        result = self.mapper.value_at(price, timestamp, self.contract, today)
        cell = GridCell(
            x=x,
            y=y,
            price=price,
            timestamp=timestamp,
            pnl=result.pnl,
            contract_value=result.value,
        )
        self._cells = self._faded(self._cells, self.insert_decay)
        self._cells.append(cell)
