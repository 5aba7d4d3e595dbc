"""
Robot-wide constants.
Values a human tunes at runtime live in NetworkTables (see utils.tuning), not here.
"""

########## OPERATOR INTERFACE ##########
kGamepadPort = 0
"""Driver Station USB port of the Logitech gamepad"""

kPublishButton = 1
"""Raw button that enables publishing of the scaled axis"""

kPublishAxis = 0
"""Raw axis that is scaled and published"""

########## NETWORKTABLES ##########
# a table is per-subsystem or per-feature, otherwise everything ends up flat in SmartDashboard
kAxisTestTable = "Axis0Test"

kAxisOutputTopic = "Axis0Multiplied"

kMultiplierTopic = "Multiplier"

kDefaultMultiplier = 1.0
