"""Statistical functions commonly used as partial application targets.

These are ordinary functions with keyword options that tend to be fixed once
and reused across many calls, such as missing-value handling for an aggregate
or the formula of a regression fitted on several datasets.

Examples:
    >>> from curried.functional.partial import make_partial
    >>> mean_na = make_partial(mean, na_rm=True)
    >>> [float(mean_na(x)) for x in ([1, None, 3], [2, 4])]
    [2.0, 3.0]
    >>>
    >>> fit_mpg = make_partial(fit_linear_model, "mpg ~ wt")
    >>> results = [fit_mpg(frame) for frame in (cars_2019, cars_2020)]
"""

import typing as tp

import jax
import jax.numpy as jnp
import numpy as np
import pandas as pd
import statsmodels.formula.api as smf

__all__ = [
    "mean",
    "fit_linear_model",
]


def mean(x: tp.Any, na_rm: bool = False) -> jax.Array:
    """Arithmetic mean with explicit missing-value handling.

    ``None``, ``NaN`` and ``pd.NA`` count as missing. Booleans count as 0 and 1.

    Args:
        x: A scalar, sequence, NumPy/JAX array or pandas Series.
        na_rm: Drop missing values before averaging. When ``False`` any
            missing value makes the result ``NaN``.

    Returns:
        A scalar JAX array. ``NaN`` if nothing is left to average.

    Raises:
        ValueError: If a non-missing value cannot be converted to a float.
    """
    series = pd.Series(np.asarray(x, dtype=object).ravel())
    missing = series.isna()

    if missing.any() and not na_rm:
        return jnp.asarray(jnp.nan)

    values = series[~missing].astype(float).to_numpy()
    if values.size == 0:
        return jnp.asarray(jnp.nan)
    return jnp.mean(jnp.asarray(values))


def fit_linear_model(
    formula: str,
    data: tp.Union[pd.DataFrame, tp.Mapping[str, tp.Any]],
    weights: tp.Optional[tp.Any] = None,
):
    """Fit a linear model described by an R-style formula.

    Uses ordinary least squares, or weighted least squares when ``weights``
    are given.

    Args:
        formula: Model formula, e.g. ``"mpg ~ wt + hp"``.
        data: DataFrame (or mapping of column name to values) holding every
            variable named in the formula.
        weights: Optional per-row weights, one per row of ``data``.

    Returns:
        The fitted ``statsmodels`` results object.
    """
    frame = data if isinstance(data, pd.DataFrame) else pd.DataFrame(data)

    if weights is None:
        return smf.ols(formula, data=frame).fit()
    return smf.wls(formula, data=frame, weights=np.asarray(weights, dtype=float)).fit()
