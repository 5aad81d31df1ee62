"""Playback core: audio devices, playlist state and the playback engine"""
