"""
RoomNest property-rental booking backend
"""
