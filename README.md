# irsimtools

Small command-line helpers for writing IRSIM switch-level simulation scripts.
It has no runtime dependencies beyond the Python standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

### irsim-cmdgen

Builds an exhaustive truth-table `.cmd` file from a list of inputs and outputs.
Inputs come first, then a single `.`, then outputs:

    irsim-cmdgen adder a b cin . sum cout

You are first asked on standard input whether you have VDD and VSS names. If
you answer `yes`, the second and third arguments name them:

    irsim-cmdgen adder VDD VSS a b cin . sum cout

The arguments are checked (too few arguments, a misplaced `.`, a second `.`,
or no outputs each print an error and the usage text, and the command exits
with status 1). A summary is then shown (inputs and outputs are listed only
when there are fewer than ten in total), and after you answer `yes`,
`adder.cmd` is written in the current directory. It holds an `analyzer` line,
the power rails driven high and low when given, and one step (`s`) for every
combination of input values, the first input being the lowest bit.

### irsim-inputgen

Interactively collects net names from standard input and writes them, space
separated, to `<first name>.in` in the current directory. Each entry can be:

- a plain name;
- an indexed array, such as `data0 … data7`;
- a hierarchical instance path, such as `{top_0/mid_1/net}`;
- a net across an arrayed instance, such as `{cell_1[0]/net} … {cell_1[3]/net}`.

Invalid numbers or index ranges are reported and the entry is skipped.

    irsim-inputgen

### irsim-decoder

Writes a fixed test script for a 9-bit select, 512-output decoder: it sets the
step size and log file, groups the `tester512_1_0[i]/out0` and `out1` nodes
into six vectors, watches them and steps through every select value from 0 to
511. The file is `decoder512_test.cmd` unless `-o`/`--output` names another.

    irsim-decoder
    irsim-decoder --output my_decoder.cmd

## Library use

The same pieces are available from Python:

    from irsimtools.cmdgen import parse_arguments, truth_table_commands, write_commands
    spec = parse_arguments(["adder", "a", "b", ".", "sum"], power=False)
    print(truth_table_commands(spec))
    write_commands(spec, ".")          # writes ./adder.cmd

`parse_arguments` raises `irsimtools.cmdgen.UsageError` (a `ValueError`) for
arguments it cannot use; `usage(power)` returns the help text.

    from irsimtools.inputgen import array_names, instance_array_names, instance_path, write_inputs
    array_names("data", 0, 3)                    # ['data0', 'data1', 'data2', 'data3']
    instance_array_names("net", "cell", 1, 0, 1) # ['{cell_1[0]/net}', '{cell_1[1]/net}']
    instance_path("net", [("top", 0)])           # '{top_0/net}'
    write_inputs(["data0", "data1"], ".")        # writes ./data0.in

    from irsimtools.decoder import decoder_commands, output_vector, write_decoder_commands
    text = decoder_commands()
    write_decoder_commands("decoder512_test.cmd")

## What it does not do

The package only writes command and input files; it does not run IRSIM or
read its results.