"""
Overview
========

Applying a module install or update on an odoo instance running in
docker compose always goes through the same steps. Odoo is started
in a throwaway container with ``--stop-after-init`` to install or
update the modules, then the running service is stopped and started
again so it loads the new code.

This library wraps those steps behind a single command line so they
can't be run out of order and stop at the first failure.

.. code-block:: bash

    odoo-compose -i sale,stock -d production -dcp /srv/odoo
"""
