# contestkit

A collection of competitive programming problem solutions. Each is a plain
Python function that takes the problem's input as arguments and returns the
answer. You can call the functions directly, test them, or build on them.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `contestkit.strings_and_arrays`
  - `decode` expands bracket-encoded strings such as `"3[b2[ca]]"`.
  - `max_subarray_sum` and `max_subarray_sum_naive` give the largest
    contiguous sum. Neither result goes below 0.
- `contestkit.may_long`: `alternating_diameter`, `queen_attack_count`,
  `football_cup`, `ncr_mod`, `magical_stone`, `miami_gp`, `pushpa_max_height`,
  `sugarcane_profit`.
- `contestkit.starters55`: `sub_permutation`, `broken_phone`, `has_fever`.
- `contestkit.starters56`: `compressed_length`, `equidistant_points`,
  `is_good_program`, `lock_draw`, `maximize_colours`,
  `min_division_operations`, `encode_queries`, `max_total_distance`,
  `can_split_gcd`, `subsequence_operations`.
- `contestkit.starters57`: `chef_profit`, `parallel_processing`,
  `can_transform`, `alice_marks`, `even_splits`, `maximum_expression`,
  `non_negative_product`, `sum_neq`, `two_palindromes`.
- `contestkit.starters58`: `equal_prefix_max_split` (with
  `prefix_max_weight` and the exhaustive `equal_split_brute`),
  `no_palindrome_string`, `submex_array`, `watching_movies`,
  `add_to_subsequence`, `break_elements`, `equivalent_numbers`,
  `piles_parity`, `rank_pages`, `reach_target`, `remove_bad_elements`.
- `contestkit.starters59`: `is_audible`, `conf_cat`, `is_happy`,
  `max_subarray_after_insert`, `sus_string`, `speciality`.
- `contestkit.starters60`: `distinct_numbers`, `palindrome_flipping`,
  `yet_another_palindrome`.
- `contestkit.numtheory`
  - Arithmetic helpers: `gcd`, `gcd_extended`, `lcm`, `modpow`, `modinv`.
  - Counting modulo 1e9+7: `ncr` and `npr`.
  - Factoring and primes: `divisors`, `prime_factors`, `sieve`.
  - `invert` swaps `0` and `1` in a binary string.

## Example

```python
from contestkit.strings_and_arrays import decode, max_subarray_sum
from contestkit.numtheory import modpow, sieve

decode("3[b2[ca]]")                        # 'bcacabcacabcaca'
max_subarray_sum([-3, 8, -2, 4, -5, 6])    # 11
modpow(2, 10, 1000)                        # 24
sieve(20)                                  # [2, 3, 5, 7, 11, 13, 17, 19]
```

## Impossible cases and bad input

Some functions return `None` when a problem has no answer:

- `alternating_diameter`
- `sub_permutation`
- `equidistant_points`
- `submex_array`
- `conf_cat`

Others return `-1` in that case, as the problem asks:

- `distinct_numbers`
- each unanswerable query in `encode_queries`

Several functions raise `ValueError` on input that breaks the problem's
rules. Examples are an empty sequence where one is required, a
non-permutation passed to `equal_prefix_max_split`, or negative amounts.

## What it does not do

The package has no command-line program. It does not read contest-style
input from standard input, and it does not print answers in a judge's output
format. To solve a whole input file, parse it yourself and call the
functions.