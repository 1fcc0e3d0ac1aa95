"""
Unit tests for option parsing and the configuration guards.
"""

import pytest

from sdvote_twavp.shared.exceptions import ConfigurationException
from sdvote_twavp.strategies.models import (
    GaugeRatioOptions,
    PoolBalanceOptions,
)

WHITELIST_21 = [f"0x{i:040x}" for i in range(21)]


class TestGaugeRatioOptions:
    """Tests for GaugeRatioOptions.from_dict."""

    def test_parses_camel_case_options(self, gauge_ratio_options):
        opts = GaugeRatioOptions.from_dict(gauge_ratio_options)

        assert opts.sample_step == 2
        assert opts.sample_size == 1
        assert opts.vsd_token_contract == gauge_ratio_options["vsdTokenContract"]
        assert opts.sd_token_gauge == gauge_ratio_options["sdTokenGauge"]
        assert opts.booster == gauge_ratio_options["booster"]
        assert opts.whitelisted == []
        assert opts.seconds_per_block == 12

    def test_sample_step_above_cap_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["sampleStep"] = 6

        with pytest.raises(ConfigurationException, match="maximum of 5 call"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_sample_step_of_one_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["sampleStep"] = 1

        with pytest.raises(ConfigurationException, match="minimum of 2"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_whitelist_above_cap_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["whiteListedAddress"] = WHITELIST_21

        with pytest.raises(
            ConfigurationException, match="maximum of 20 whitelisted address"
        ):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_whitelist_at_cap_is_accepted(self, gauge_ratio_options):
        gauge_ratio_options["whiteListedAddress"] = WHITELIST_21[:20]

        opts = GaugeRatioOptions.from_dict(gauge_ratio_options)

        assert len(opts.whitelisted) == 20

    def test_missing_contract_is_rejected(self, gauge_ratio_options):
        del gauge_ratio_options["vsdTokenContract"]

        with pytest.raises(ConfigurationException, match="vsdTokenContract"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_invalid_address_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["booster"] = "0x1234"

        with pytest.raises(ConfigurationException, match="booster"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_non_integer_sample_step_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["sampleStep"] = 2.5

        with pytest.raises(ConfigurationException, match="not an integer"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)


class TestPoolBalanceOptions:
    """Tests for PoolBalanceOptions.from_dict."""

    def test_parses_camel_case_options(self, pool_balance_options):
        opts = PoolBalanceOptions.from_dict(pool_balance_options)

        assert opts.number_of_blocks == 3
        assert opts.days_interval == 2
        assert opts.seconds_per_block == 12
        assert opts.pools == pool_balance_options["pools"]
        assert opts.index_sd_token_in_pool == 1
        assert opts.bot_address == pool_balance_options["botAddress"]
        assert opts.decimals == 18

    def test_number_of_blocks_above_cap_is_rejected(
        self, pool_balance_options
    ):
        pool_balance_options["twavpNumberOfBlocks"] = 6

        with pytest.raises(ConfigurationException, match="maximum of 5 call"):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_whitelist_above_cap_is_rejected(self, pool_balance_options):
        pool_balance_options["whiteListedAddress"] = WHITELIST_21

        with pytest.raises(ConfigurationException, match="maximum of 20"):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_pools_are_optional(self, pool_balance_options):
        del pool_balance_options["pools"]
        del pool_balance_options["indexSdTokenInPool"]

        opts = PoolBalanceOptions.from_dict(pool_balance_options)

        assert opts.pools == []
        assert opts.index_sd_token_in_pool == 0

    def test_pool_index_required_with_pools(self, pool_balance_options):
        del pool_balance_options["indexSdTokenInPool"]

        with pytest.raises(
            ConfigurationException, match="indexSdTokenInPool"
        ):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_invalid_pool_is_rejected(self, pool_balance_options):
        pool_balance_options["pools"] = ["not-an-address"]

        with pytest.raises(ConfigurationException, match="pools"):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_block_time_is_required(self, pool_balance_options):
        del pool_balance_options["blockPerSec"]

        with pytest.raises(ConfigurationException, match="blockPerSec"):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_decimals_default_to_eighteen(self, pool_balance_options):
        del pool_balance_options["decimals"]

        assert PoolBalanceOptions.from_dict(pool_balance_options).decimals == 18


class TestWindowAndNumbers:
    """Range checks on the window length and numeric options."""

    def test_negative_sample_size_is_rejected(self, gauge_ratio_options):
        gauge_ratio_options["sampleSize"] = -1

        with pytest.raises(ConfigurationException, match="sampleSize"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_negative_days_interval_is_rejected(self, pool_balance_options):
        pool_balance_options["twavpDaysInterval"] = -0.5

        with pytest.raises(ConfigurationException, match="twavpDaysInterval"):
            PoolBalanceOptions.from_dict(pool_balance_options)

    def test_zero_window_is_accepted(self, gauge_ratio_options):
        gauge_ratio_options["sampleSize"] = 0

        assert GaugeRatioOptions.from_dict(gauge_ratio_options).sample_size == 0

    @pytest.mark.parametrize(
        "key", ["sampleStep", "sampleSize", "blockPerSec"]
    )
    def test_infinite_number_is_rejected(self, gauge_ratio_options, key):
        gauge_ratio_options[key] = float("inf")

        with pytest.raises(ConfigurationException, match="not finite"):
            GaugeRatioOptions.from_dict(gauge_ratio_options)

    def test_nan_is_rejected(self, pool_balance_options):
        pool_balance_options["decimals"] = float("nan")

        with pytest.raises(ConfigurationException, match="not finite"):
            PoolBalanceOptions.from_dict(pool_balance_options)
