#### audio synthesis for auditioning notes and fretted chords.
#### this only ever produces sound, it does not analyse audio input.

from .util import log
from . import _settings

import numpy as np


def normalise(x, ceil=None):
    if ceil is None:
        ceil = np.max(np.abs(x), initial=0)
    if ceil == 0:
        return x
    return x / ceil

def lin_falloff(wave, start_at=0.0):
    """linear fade to silence, from start_at (in seconds) to the end of the wave"""
    start_samples = int(_settings.SAMPLE_RATE * start_at)
    end = np.copy(wave[start_samples:])
    end_samples = len(end)

    # falloff at the end
    down_profile = np.linspace(1, 0, end_samples)
    end *= down_profile
    return np.concatenate([wave[:start_samples], end], axis=0)

def unif_wave_table(table_len, rng):
    wave_table = (rng.random(table_len)*2 -1).astype(float)
    return wave_table

def karplus_strong(freq, duration, decay=0.99, seed=None):
    """synthesises sound sample of a desired frequency and duration
    according to Karplus-Strong algorithm for guitar-pluck timbre:
    a short burst of noise, one period long, repeated with successive decay"""
    fs = _settings.SAMPLE_RATE
    rng = np.random.default_rng(seed)

    num_samples = int(duration * fs)
    table_len = max(int(fs // round(freq)), 2)
    log(f'Desired freq is {freq:.1f}, using table length {table_len} for {num_samples} samples')

    wave_table = unif_wave_table(table_len, rng)
    n_iter = int(np.ceil(num_samples / table_len))

    # successive periods are smoothed (averaged with their neighbour) and decayed:
    periods = np.empty((n_iter, table_len))
    period = wave_table
    for i in range(n_iter):
        periods[i] = period
        period = decay * 0.5 * (period + np.roll(period, -1))

    samples = periods.reshape(-1)[:num_samples]
    return samples

def note_wave(note, duration=2, falloff=True, seed=None):
    """a plucked-string wave at the pitch of a Note"""
    wave = karplus_strong(note.pitch, duration, seed=seed)
    return lin_falloff(wave) if falloff else wave

def arrange_melody(waves, delay=0.5, norm=True):
    """layers waves one after another, each starting delay seconds after the last,
    e.g. to strum the strings of a chord"""
    delay_frames = int(delay * _settings.SAMPLE_RATE)
    total_len = max([delay_frames*i + len(w) for i, w in enumerate(waves)], default=0)
    melody_wave = np.zeros(total_len)
    for i, wave in enumerate(waves):
        start = delay_frames * i
        melody_wave[start : start+len(wave)] += wave
    if norm:
        melody_wave = normalise(melody_wave)
    return melody_wave

def strum_wave(notes, delay=0.05, duration=3, seed=None):
    """the wave of a list of notes strummed from first to last"""
    waves = [note_wave(n, duration=duration, seed=None if seed is None else seed+i) for i, n in enumerate(notes)]
    return arrange_melody(waves, delay=delay)

def play_wave(wave, amplitude=1, block=False):
    # sounddevice needs a working audio backend, so is only imported when sound is actually played:
    import sounddevice as sd
    sd.play(wave*amplitude, _settings.SAMPLE_RATE, blocking=block)
