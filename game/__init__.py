"""
Game core: collision, movement, rounds and the pygame shell pieces
"""
