"""Powerball draw watcher: fetch, compare, classify, notify."""
