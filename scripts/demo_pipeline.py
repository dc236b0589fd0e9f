"""
tsrepr - End-to-End Pipeline Demo

This script demonstrates the full data flow:
1. Bit-level encoding (clipping / trending)
2. Run-length encoding
3. FeaClip / FeaTrend / FeaClipTrend vectors
4. Batch extraction for many series
5. Windowed representations (PAA, seasonal profile)
"""

import logging
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pandas as pd

from tsrepr.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

print('='*60)
print('TSREPR - END-TO-END PIPELINE DEMO')
print('='*60)

# Simulate 10 days of half-hourly electricity load
np.random.seed(42)
freq = 48
t = np.arange(freq * 10)
load = 10 + 3 * np.sin(2 * np.pi * t / freq) + np.random.normal(0, 0.5, len(t))

# Step 1: Bit-level encoding
print('\n[1] BIT-LEVEL ENCODING')
from tsrepr.encoding import clipping, trending

bits = clipping(load)
trend = trending(load)
print(f'   [OK] Clipped {len(load)} values: {bits[:freq].sum()} above mean on day 1')
print(f'   [OK] Trend bits: {len(trend)} (one per step)')

# Step 2: Run-length encoding
print('\n[2] RUN-LENGTH ENCODING')
from tsrepr.encoding import rle_encode

runs = rle_encode(bits)
print(f'   [OK] {len(runs)} runs, first three: {runs[:3]}')

# Step 3: Feature vectors
print('\n[3] FEATURE VECTORS')
from tsrepr.features import FeaClipFeatures, feaclip, featrend, feacliptrend

clip_vec = feaclip(load)
print(f'   [OK] FeaClip: {FeaClipFeatures.from_vector(clip_vec)}')
print(f'   [OK] FeaTrend (max, 4 pieces): {featrend(load, "max", pieces=4, order=4)}')
print(f'   [OK] FeaClipTrend length: {len(feacliptrend(load, "sum"))}')

# Step 4: Batch extraction
print('\n[4] BATCH EXTRACTION')
from tsrepr.features import RepresentationEngine

days = pd.DataFrame(
    load.reshape(10, freq),
    index=pd.date_range('2026-01-12', periods=10, freq='D'),
)
engine = RepresentationEngine()
matrix = engine.compute_matrix(days, 'feacliptrend')
print(f'   [OK] {matrix.shape[0]} days x {matrix.shape[1]} features')
print(matrix.head(3).to_string())

# Step 5: Windowed representations
print('\n[5] WINDOWED REPRESENTATIONS')
from tsrepr.windows import repr_paa, repr_seas_profile

print(f'   [OK] PAA (q=48, mean): {np.round(repr_paa(load, 48, "mean"), 2)}')
profile = repr_seas_profile(load, freq, 'median')
print(f'   [OK] Seasonal profile peak at slot {int(np.argmax(profile))} of {freq}')

print('\n' + '='*60)
print('DEMO COMPLETE')
print('='*60)
