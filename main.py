from argloom import *

__styles__ = {
    "separator": "bold underline #FFFFFF",
}


entries = [
    option("verbose", "v", help="Chatty output.", kind=OptionKind.FLAG, default=True, negatable=True),
    option("mode", "m", help="Build mode.", allowed_help={"debug": "Unoptimized.", "release": "Optimized."}, default="debug"),
    "Output:",
    option("output", "o", value_help="FILE", help="Where to write the report.", mandatory=True),
    option("define", "D", value_help="KEY=VALUE", kind=OptionKind.MULTIPLE, default=["ci=false"]),
]


if __name__ == '__main__':
    print_usage(entries)
