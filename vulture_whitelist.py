"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or by callers outside the package.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_list  # noqa: F821  # unused method (writepy/core/config.py:38)
_.expand_output  # noqa: F821  # unused method (writepy/core/config.py:46)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (writepy/core/config.py:51)

# Pydantic model_config class variables - read by framework at class definition time
model_config  # noqa: F821  # unused variable (writepy/core/config.py:18)
model_config  # noqa: F821  # unused variable (writepy/core/types.py:44)
model_config  # noqa: F821  # unused variable (writepy/corrections/apply.py:26)

# Public engine API for hosts - called by editors embedding the engine, not the CLI
_.set_callback  # noqa: F821  # unused method (writepy/engine.py:81)
_.restore_dismissals  # noqa: F821  # unused method (writepy/engine.py:196)
_.calculate_score_excluding_dismissed  # noqa: F821  # unused method (writepy/analysis/dismissals.py:104)
adjust_positions_for_batch  # unused function (writepy/corrections/positions.py:51)
calculate_score_after_fix  # unused function (writepy/detectors/score.py:73)
has_mixed_tones  # unused function (writepy/detectors/tone.py:277)
analyze_sentence_tone  # unused function (writepy/detectors/tone.py:285)
is_valid_tone_analysis  # unused function (writepy/detectors/tone.py:290)
