"""
Built-in catalogue of well-known cross-references.
"""

from versegraph.models.graph import ConnectionStrength, ConnectionType, VerseConnection


def _connection(
    source: str,
    target: str,
    connection_type: ConnectionType,
    strength: ConnectionStrength,
    explanation: str,
) -> VerseConnection:
    # Stable ids so repeated seeding does not duplicate rows
    slug = f"{source}>{target}".lower().replace(" ", "").replace(":", ".")
    return VerseConnection(
        id=f"xref_builtin_{slug}",
        source_reference=source,
        target_reference=target,
        connection_type=connection_type,
        strength=strength,
        explanation=explanation,
    )


STRONG = ConnectionStrength.STRONG
MODERATE = ConnectionStrength.MODERATE

BUILTIN_CROSS_REFERENCES: list[VerseConnection] = [
    # Messianic prophecies
    _connection("Isaiah 7:14", "Matthew 1:23", ConnectionType.PROPHECY_FULFILLMENT, STRONG,
                "Virgin birth prophecy fulfilled in Jesus"),
    _connection("Micah 5:2", "Matthew 2:6", ConnectionType.PROPHECY_FULFILLMENT, STRONG,
                "Bethlehem as birthplace of the Messiah"),
    _connection("Isaiah 53:5", "1 Peter 2:24", ConnectionType.PROPHECY_FULFILLMENT, STRONG,
                "Suffering servant prophecy fulfilled in Christ's crucifixion"),
    _connection("Psalm 22:1", "Matthew 27:46", ConnectionType.DIRECT_QUOTE, STRONG,
                "Jesus quotes Psalm 22 from the cross"),
    _connection("Psalm 110:1", "Matthew 22:44", ConnectionType.DIRECT_QUOTE, STRONG,
                "Jesus references David's psalm about the Messiah"),
    # Synoptic parallels
    _connection("Matthew 3:13-17", "Mark 1:9-11", ConnectionType.PARALLEL_PASSAGE, STRONG,
                "Jesus's baptism recorded in both Gospels"),
    _connection("Matthew 3:13-17", "Luke 3:21-22", ConnectionType.PARALLEL_PASSAGE, STRONG,
                "Jesus's baptism in Luke's Gospel"),
    # Typology and themes
    _connection("Genesis 3:15", "Romans 16:20", ConnectionType.TYPOLOGY, MODERATE,
                "Proto-evangelium connection to ultimate victory"),
    _connection("Exodus 12:1-13", "1 Corinthians 5:7", ConnectionType.TYPOLOGY, STRONG,
                "Passover lamb as type of Christ"),
    _connection("John 3:16", "Romans 5:8", ConnectionType.THEMATIC_LINK, MODERATE,
                "God's love demonstrated through Christ"),
    _connection("John 3:16", "1 John 4:9", ConnectionType.THEMATIC_LINK, MODERATE,
                "God sent his only begotten Son into the world"),
    _connection("Romans 5:8", "1 John 4:10", ConnectionType.THEMATIC_LINK, ConnectionStrength.WEAK,
                "Love shown first by God, not by us"),
    _connection("Deuteronomy 6:4-5", "Mark 12:29-30", ConnectionType.DIRECT_QUOTE, STRONG,
                "Jesus quotes the Shema as greatest commandment"),
    # Historical context
    _connection("2 Kings 25:1-21", "Jeremiah 52:1-27", ConnectionType.HISTORICAL_CONTEXT, STRONG,
                "Fall of Jerusalem recorded in both books"),
]  # fmt: skip
