"""Built-in work item templates shared by every user."""

from renovator.domain.entities import WorkItemCategory

# (name, description, category, estimated hours, default price)
DEFAULT_TEMPLATES = [
    ("Remove existing cabinets", "Demolish and remove old kitchen or bathroom cabinets", WorkItemCategory.demolition, 4, 500),
    ("Remove flooring", "Remove existing flooring material", WorkItemCategory.demolition, 8, 800),
    ("Remove drywall", "Demolish and remove drywall", WorkItemCategory.demolition, 6, 600),
    ("Frame interior walls", "Build wood frame for interior walls", WorkItemCategory.framing, 16, 2000),
    ("Frame door openings", "Frame rough openings for doors", WorkItemCategory.framing, 4, 400),
    ("Frame window openings", "Frame rough openings for windows", WorkItemCategory.framing, 4, 400),
    ("Electrical rough-in", "Install electrical wiring, boxes, and conduit", WorkItemCategory.electrical, 16, 2500),
    ("Install outlets and switches", "Install electrical outlets and light switches", WorkItemCategory.electrical, 8, 800),
    ("Install light fixtures", "Install ceiling and wall light fixtures", WorkItemCategory.electrical, 4, 600),
    ("Plumbing rough-in", "Install water supply and drain pipes", WorkItemCategory.plumbing, 16, 2800),
    ("Install fixtures", "Install sinks, faucets, and toilets", WorkItemCategory.plumbing, 8, 1200),
    ("Install water heater", "Install or replace water heater", WorkItemCategory.plumbing, 6, 1500),
    ("Install ductwork", "Install HVAC ductwork and vents", WorkItemCategory.hvac, 16, 3000),
    ("Install HVAC unit", "Install heating and cooling unit", WorkItemCategory.hvac, 8, 4500),
    ("Hang drywall", "Install drywall sheets on walls and ceilings", WorkItemCategory.drywall, 12, 1500),
    ("Tape and mud drywall", "Tape seams and apply joint compound", WorkItemCategory.drywall, 16, 1200),
    ("Sand and finish drywall", "Sand drywall smooth and apply final coat", WorkItemCategory.drywall, 8, 800),
    ("Prime walls", "Apply primer to walls and ceilings", WorkItemCategory.painting, 8, 600),
    ("Paint walls", "Apply finish paint to walls", WorkItemCategory.painting, 12, 1000),
    ("Paint trim and doors", "Paint baseboards, trim, and doors", WorkItemCategory.painting, 8, 800),
    ("Install hardwood flooring", "Install hardwood floor planks", WorkItemCategory.flooring, 16, 3500),
    ("Install tile flooring", "Install ceramic or porcelain tile", WorkItemCategory.flooring, 16, 3000),
    ("Install carpet", "Install carpet with padding", WorkItemCategory.flooring, 8, 2000),
    ("Install vinyl flooring", "Install vinyl plank or sheet flooring", WorkItemCategory.flooring, 12, 2200),
    ("Install baseboards", "Install baseboard trim", WorkItemCategory.finishing, 8, 800),
    ("Install crown molding", "Install crown molding at ceiling", WorkItemCategory.finishing, 8, 1000),
    ("Install doors", "Hang interior doors with hardware", WorkItemCategory.finishing, 4, 600),
    ("Install cabinets", "Install kitchen or bathroom cabinets", WorkItemCategory.finishing, 16, 2500),
    ("Install countertops", "Template and install countertops", WorkItemCategory.finishing, 8, 3000),
    ("Daily cleanup", "Daily site cleanup and debris removal", WorkItemCategory.cleanup, 2, 150),
    ("Final cleanup", "Thorough final cleaning before handover", WorkItemCategory.cleanup, 8, 500),
    ("Dumpster rental", "Rent dumpster for construction debris", WorkItemCategory.cleanup, 0, 400),
    ("Framing inspection", "Schedule and pass framing inspection", WorkItemCategory.inspection, 2, 200),
    ("Electrical inspection", "Schedule and pass electrical inspection", WorkItemCategory.inspection, 2, 200),
    ("Plumbing inspection", "Schedule and pass plumbing inspection", WorkItemCategory.inspection, 2, 200),
    ("Final inspection", "Schedule and pass final building inspection", WorkItemCategory.inspection, 2, 250),
]
