# io_modules/exporting.py
import os

def _resolve_filepath(title, extension, directory, folder, overwrite):
    """
    Build '<directory>/<folder>/<title><extension>', creating folders as needed.
    Returns None if the target exists and the user declines to overwrite.
    """
    if title.lower().endswith(extension.lower()):
        title = title[:-len(extension)]
    filename = os.path.join(folder, f"{title}{extension}") if folder else f"{title}{extension}"

    if directory is None:
        directory = os.getcwd()

    filepath = os.path.join(directory, filename)
    target_dir = os.path.dirname(filepath)
    if target_dir and not os.path.isdir(target_dir):
        try:
            os.makedirs(target_dir)
            print(f"Directory '{target_dir}' created.")
        except OSError as e:
            print(f"Error creating directory '{target_dir}': {e}")
            return None

    if os.path.exists(filepath) and not overwrite:
        response = input(f"File '{filepath}' exists. Overwrite? (y/n): ").lower()
        if response != 'y':
            print("Export canceled.")
            return None

    return filepath

def export(model, title, export_type='stl', directory=None, folder='tower_models', overwrite=False):
    """
    Export a CadQuery model to a file, with optional directory and overwrite check.
    Returns the written path, or None if nothing was written.
    """

    supported_types = {
        'stl': '.stl',
        'STEP': '.STEP',
        'step': '.step',
    }

    if export_type not in supported_types:
        print(f"Error: Unsupported export type '{export_type}'")
        return None

    filepath = _resolve_filepath(title, supported_types[export_type], directory, folder, overwrite)
    if filepath is None:
        return None

    try:
        model.export(filepath)
        print(f"Model exported as '{filepath}'")
    except AttributeError:
        print("Error: The provided model does not have an 'export' method.")
        return None
    except IOError as e:
        print(f"IOError writing '{filepath}': {e}")
        return None
    return filepath

def export_plot(fig, title, export_type='png', directory=None, folder='tower_plots', overwrite=False):
    """
    Export a Matplotlib Figure img to a file, with optional directory and overwrite check.
    """

    supported_types = {
        'png': '.png',
        'svg': '.svg',
        'pdf': '.pdf',
    }

    export_type = export_type.lower()
    if export_type not in supported_types:
        print(f"Error: Unsupported export type '{export_type}'")
        return None

    filepath = _resolve_filepath(title, supported_types[export_type], directory, folder, overwrite)
    if filepath is None:
        return None

    try:
        fig.savefig(filepath)
        print(f"Plot exported as '{filepath}'")
    except AttributeError:
        print("Error: The provided figure does not have a 'savefig' method.")
        return None
    except IOError as e:
        print(f"IOError writing '{filepath}': {e}")
        return None
    return filepath
