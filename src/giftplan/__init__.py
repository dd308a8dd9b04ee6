"""giftplan — savings projection for gifts to a child's account."""

__version__ = "0.1.0"

from giftplan.analytics.metrics import ProjectionSummary as ProjectionSummary
from giftplan.analytics.metrics import compute_summary as compute_summary
from giftplan.analytics.metrics import investment_split as investment_split
from giftplan.analytics.metrics import profit_ratio_percent as profit_ratio_percent
from giftplan.analytics.table import decimate as decimate
from giftplan.config.defaults import default_input as default_input
from giftplan.config.defaults import default_second_gift as default_second_gift
from giftplan.config.defaults import preset_input as preset_input
from giftplan.config.schema import ProjectionInput as ProjectionInput
from giftplan.config.schema import SecondGift as SecondGift
from giftplan.core.engine import YearSnapshot as YearSnapshot
from giftplan.core.engine import project as project
from giftplan.formatting.currency import format_full as format_full
from giftplan.formatting.currency import format_short as format_short
from giftplan.utils.exceptions import ConfigError as ConfigError
from giftplan.utils.exceptions import GiftplanError as GiftplanError
from giftplan.utils.exceptions import InvalidInputError as InvalidInputError
